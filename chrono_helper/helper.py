#!filepath: chrono_helper/helper.py
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from chrono_helper.adapters.locale_formatter import (
    BabelLocaleFormatter,
    DisabledLocaleFormatter,
    LocaleFormatter,
)
from chrono_helper.adapters.zone_resolver import (
    DisabledZoneResolver,
    ZoneInfoResolver,
    ZoneResolver,
)
from chrono_helper.observability.instrumentation import Instrumentation
from chrono_helper.pipeline.pipeline import DateTimePipeline
from chrono_helper.utils.params import ParameterSet


class OutputSink(Protocol):
    def write(self, text: str) -> Any:
        ...


class SubExpression:
    """
    嵌套调用：作为另一次调用的参数值，按需渲染

        helper.render(
            from_timestamp="618658211",
            years_since=helper.expr(from_timestamp="487771200"),
        )
    """

    def __init__(self, helper: "DateTimeHelper", params: Mapping[str, Any]):
        self.helper = helper
        self.params = dict(params)

    def render(self) -> str:
        return self.helper.render(self.params)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SubExpression({self.params!r})"


class DateTimeHelper:
    """
    对宿主（模板引擎等）暴露的唯一操作：

      params（name → 可渲染值） → 一个字符串，或一个 UserInputError 子类

    不持有跨调用状态；同一实例可被并发调用。
    """

    def __init__(
            self,
            zone_resolver: Optional[ZoneResolver] = None,
            locale_formatter: Optional[LocaleFormatter] = None,
            inst: Optional[Instrumentation] = None,
    ):
        self.zone_resolver = zone_resolver if zone_resolver is not None else ZoneInfoResolver(inst)
        self.locale_formatter = (
            locale_formatter if locale_formatter is not None else BabelLocaleFormatter(inst)
        )
        self.pipeline = DateTimePipeline.build(
            zone_resolver=self.zone_resolver,
            locale_formatter=self.locale_formatter,
            inst=inst,
        )

    @classmethod
    def from_config(cls, cfg, inst: Optional[Instrumentation] = None) -> "DateTimeHelper":
        """根据 AppConfig.capability 装配时区 / locale 能力"""
        capability = cfg.capability
        zone_resolver = ZoneInfoResolver(inst) if capability.timezone else DisabledZoneResolver(inst)
        locale_formatter = (
            BabelLocaleFormatter(inst) if capability.locale else DisabledLocaleFormatter(inst)
        )
        return cls(zone_resolver=zone_resolver, locale_formatter=locale_formatter, inst=inst)

    # --------------------------------------------------
    def render(self, params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> str:
        values = dict(params or {})
        values.update(kwargs)
        return self.pipeline.run(ParameterSet(values)).output

    def call(self, params: Optional[Mapping[str, Any]], out: OutputSink) -> None:
        """成功时写入 out；失败时不写任何内容并抛出错误"""
        out.write(self.render(params))

    def expr(self, params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> SubExpression:
        values = dict(params or {})
        values.update(kwargs)
        return SubExpression(self, values)

    __call__ = render


_default_helper: Optional[DateTimeHelper] = None


def default_helper() -> DateTimeHelper:
    global _default_helper
    if _default_helper is None:
        _default_helper = DateTimeHelper()
    return _default_helper


def render(params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> str:
    return default_helper().render(params, **kwargs)


def expr(params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> SubExpression:
    return default_helper().expr(params, **kwargs)
