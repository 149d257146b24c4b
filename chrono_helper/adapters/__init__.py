from .base_adapter import BaseAdapter
from .zone_resolver import ZoneResolver, ZoneInfoResolver, DisabledZoneResolver
from .locale_formatter import LocaleFormatter, BabelLocaleFormatter, DisabledLocaleFormatter

__all__ = [
    "BaseAdapter",
    "ZoneResolver", "ZoneInfoResolver", "DisabledZoneResolver",
    "LocaleFormatter", "BabelLocaleFormatter", "DisabledLocaleFormatter",
]
