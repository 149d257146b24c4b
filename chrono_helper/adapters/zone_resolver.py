# chrono_helper/adapters/zone_resolver.py
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from chrono_helper.adapters.base_adapter import BaseAdapter
from chrono_helper.utils.errors import InvalidTimezone, UnsupportedCapability


class ZoneResolver(BaseAdapter, ABC):
    """
    ZoneResolver：IANA 时区名 → tzinfo

    with_timezone 的命名时区分支只依赖该能力。
    """

    @abstractmethod
    def resolve(self, name: str) -> tzinfo:
        ...


class ZoneInfoResolver(ZoneResolver):
    """stdlib zoneinfo（系统 tz 数据库，缺失时回落到 tzdata 包）"""

    def resolve(self, name: str) -> tzinfo:
        with self.timer("ZoneInfoResolver.resolve"):
            try:
                return ZoneInfo(name)
            except (ZoneInfoNotFoundError, ValueError, OSError) as e:
                raise InvalidTimezone(
                    "Failed to parse IANA timezone. Supported values are IANA timezones, "
                    f"local or valid fixed offset: {name!r}",
                    param="with_timezone",
                ) from e


class DisabledZoneResolver(ZoneResolver):
    """timezone capability 关闭时使用"""

    def resolve(self, name: str) -> tzinfo:
        raise UnsupportedCapability(
            f"Named timezones are disabled; enable the `timezone` capability to use {name!r}.",
            param="with_timezone",
        )
