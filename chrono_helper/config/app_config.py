#!filepath: chrono_helper/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .capability_config import CapabilityConfig
from .log_config import LogConfig

# 环境变量覆盖：env 名 → (section, key)
ENV_OVERRIDES = {
    "CHRONO_HELPER_LOG_LEVEL": ("log", "level"),
    "CHRONO_HELPER_LOG_DIR": ("log", "dir"),
    "CHRONO_HELPER_TIMEZONE": ("capability", "timezone"),
    "CHRONO_HELPER_LOCALE": ("capability", "locale"),
}


def default_config_path() -> str:
    """
    包内默认配置：chrono_helper/config/base.yml
    不依赖当前工作目录
    """
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig
    capability: CapabilityConfig

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 base.yml
        - .env 从当前工作目录读取（存在才加载）
        - CHRONO_HELPER_* 环境变量覆盖 YAML
        """
        # 1) 先加载 .env
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env 覆盖
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is not None:
                raw.setdefault(section, {})[key] = value

        return cls(**raw)
