#!filepath: chrono_helper/cli.py
from typing import Dict, List, Optional

import typer
from pydantic import ValidationError
from rich import print
from rich.markup import escape

from chrono_helper import __version__
from chrono_helper.config.app_config import AppConfig
from chrono_helper.helper import DateTimeHelper
from chrono_helper.utils.errors import UserInputError
from chrono_helper.utils.logger import init_logging

app = typer.Typer(help="chrono-helper: datetime initialize → modify → finalize CLI")


def parse_cli_params(items: List[str]) -> Dict[str, str]:
    """
    key=value → {key: value}
    单独的 key 视为开关（to_timestamp → to_timestamp=true）
    """
    params: Dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not key:
            raise ValueError(f"Invalid parameter {item!r}, expected key=value")
        params[key] = value if sep else "true"
    return params


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def render(
    params: Optional[List[str]] = typer.Argument(None, help="key=value，例如 from_timestamp=618658211"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML 配置文件"),
):
    """
    渲染一次 datetime 变换
    """
    try:
        parsed = parse_cli_params(params or [])
    except ValueError as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    # 未指定 --config 时使用包内 base.yml
    try:
        cfg = AppConfig.load(config)
    except (FileNotFoundError, ValidationError) as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    logs = init_logging(cfg.log)
    logs.info(f"[cli] render {parsed}")
    helper = DateTimeHelper.from_config(cfg)

    try:
        output = helper.render(parsed)
    except UserInputError as err:
        print(f"[red]{err.kind}: {escape(str(err))}[/red]")
        raise typer.Exit(code=1)

    typer.echo(output)


if __name__ == "__main__":
    app()

# python -m chrono_helper.cli render from_timestamp=618658211 to_rfc2822
