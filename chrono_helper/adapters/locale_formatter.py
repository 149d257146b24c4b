# chrono_helper/adapters/locale_formatter.py
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, Dict

from babel import Locale, UnknownLocaleError

from chrono_helper.adapters.base_adapter import BaseAdapter
from chrono_helper.utils.errors import InvalidLocale, UnsupportedCapability


class LocaleFormatter(BaseAdapter, ABC):
    """
    LocaleFormatter：按 locale 输出月份 / 星期名称

    - validate(tag) : 在 finalizer resolve 阶段校验 locale
    - format(...)   : strftime 风格 pattern + locale → 文本
    """

    @abstractmethod
    def validate(self, tag: str) -> None:
        ...

    @abstractmethod
    def format(self, dt: datetime, pattern: str, tag: str) -> str:
        ...


class BabelLocaleFormatter(LocaleFormatter):
    """
    Babel（CLDR 数据）实现：

      %A %a  → 星期（wide / abbreviated）
      %B %b %h → 月份（wide / abbreviated）
      %p     → AM / PM

    其余指令原样交给 datetime.strftime。
    """

    def _load(self, tag: str) -> Locale:
        try:
            return Locale.parse(tag)
        except (UnknownLocaleError, ValueError, TypeError) as e:
            raise InvalidLocale(f"Invalid locale provided: {tag}", param="locale") from e

    def validate(self, tag: str) -> None:
        self._load(tag)

    def _names(self, locale: Locale, dt: datetime) -> Dict[str, Callable[[], str]]:
        return {
            "A": lambda: locale.days["format"]["wide"][dt.weekday()],
            "a": lambda: locale.days["format"]["abbreviated"][dt.weekday()],
            "B": lambda: locale.months["format"]["wide"][dt.month],
            "b": lambda: locale.months["format"]["abbreviated"][dt.month],
            "h": lambda: locale.months["format"]["abbreviated"][dt.month],
            "p": lambda: locale.periods["am" if dt.hour < 12 else "pm"],
        }

    def format(self, dt: datetime, pattern: str, tag: str) -> str:
        locale = self._load(tag)
        names = self._names(locale, dt)

        with self.timer("BabelLocaleFormatter.format"):
            parts = []
            i = 0
            while i < len(pattern):
                ch = pattern[i]
                if ch == "%" and i + 1 < len(pattern):
                    directive = pattern[i + 1]
                    if directive in names:
                        # 名称里出现的 % 需要转义，避免被 strftime 再次解释
                        parts.append(names[directive]().replace("%", "%%"))
                    else:
                        parts.append(pattern[i:i + 2])
                    i += 2
                else:
                    parts.append(ch)
                    i += 1

            return dt.strftime("".join(parts))


class DisabledLocaleFormatter(LocaleFormatter):
    """locale capability 关闭时使用"""

    def _unsupported(self, tag: str) -> UnsupportedCapability:
        return UnsupportedCapability(
            f"Localized formatting is disabled; enable the `locale` capability "
            f"for the `locale`={tag} param to work.",
            param="locale",
        )

    def validate(self, tag: str) -> None:
        raise self._unsupported(tag)

    def format(self, dt: datetime, pattern: str, tag: str) -> str:
        raise self._unsupported(tag)
