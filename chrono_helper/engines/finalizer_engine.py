#!filepath: chrono_helper/engines/finalizer_engine.py
from __future__ import annotations

from typing import Optional

from chrono_helper.adapters.locale_formatter import BabelLocaleFormatter, LocaleFormatter
from chrono_helper.core.choices import (
    FinalizerChoice,
    Format,
    ToRfc2822,
    ToRfc3339,
    ToTimestamp,
    YearsSince,
)
from chrono_helper.core.instant import Instant
from chrono_helper.engines.base import BaseEngine
from chrono_helper.utils.datetime_utils import DateTimeUtils
from chrono_helper.utils.errors import InvalidFormat, NegativeRange, OutOfRange
from chrono_helper.utils.params import ParameterSet

# (param, unit) —— 顺序即优先级
TIMESTAMP_TARGETS = (
    ("to_timestamp", "seconds"),
    ("to_timestamp_millis", "millis"),
    ("to_timestamp_micros", "micros"),
    ("to_timestamp_nanos", "nanos"),
)


class FinalizerEngine(BaseEngine[FinalizerChoice]):
    """
    FinalizerEngine（输出编码）

    优先级：
      output_format(+locale) > to_rfc2822 > to_timestamp > to_timestamp_millis
      > to_timestamp_micros > to_timestamp_nanos > years_since > RFC 3339（默认）
    """

    def __init__(self, locale_formatter: Optional[LocaleFormatter] = None):
        self.locale_formatter = (
            locale_formatter if locale_formatter is not None else BabelLocaleFormatter()
        )

    # ==================================================
    # resolve
    # ==================================================
    def resolve(self, params: ParameterSet) -> FinalizerChoice:
        if params.has("output_format"):
            locale = params.text("locale") if params.has("locale") else None
            if locale is not None:
                self.locale_formatter.validate(locale)
            return Format(pattern=params.text("output_format"), locale=locale)

        if params.has("to_rfc2822"):
            return ToRfc2822()

        name = params.first_present(name for name, _ in TIMESTAMP_TARGETS)
        if name is not None:
            return ToTimestamp(param=name, unit=dict(TIMESTAMP_TARGETS)[name])

        if params.has("years_since"):
            text = params.text("years_since")
            try:
                base = DateTimeUtils.parse_rfc3339(text)
            except ValueError as e:
                raise InvalidFormat(f"Invalid RFC3339 datetime format: {e}", param="years_since") from e
            return YearsSince(base=base)

        return ToRfc3339()

    # ==================================================
    # execute
    # ==================================================
    def execute(self, instant: Instant, choice: FinalizerChoice) -> str:
        if isinstance(choice, Format):
            return self._format(instant, choice)

        if isinstance(choice, ToRfc2822):
            return DateTimeUtils.format_rfc2822(instant)

        if isinstance(choice, ToTimestamp):
            value = DateTimeUtils.timestamp(instant, choice.unit)
            if not DateTimeUtils.fits_i64(value):
                raise OutOfRange(
                    "An i64 with nanosecond precision can span a range of ~584 years. "
                    "This timestamp is out of range.",
                    param=choice.param,
                )
            return str(value)

        if isinstance(choice, YearsSince):
            years = DateTimeUtils.years_since(instant, choice.base)
            if years is None:
                raise NegativeRange("Negative range, try swapping the parameters.", param="years_since")
            return str(years)

        if isinstance(choice, ToRfc3339):
            return DateTimeUtils.format_rfc3339(instant)

        raise TypeError(f"unknown finalizer choice: {choice!r}")

    def _format(self, instant: Instant, choice: Format) -> str:
        try:
            if choice.locale is not None:
                return self.locale_formatter.format(instant.to_datetime(), choice.pattern, choice.locale)
            return DateTimeUtils.format_with_pattern(instant, choice.pattern)
        except ValueError as e:
            raise InvalidFormat(f"Invalid output format: {e}", param="output_format") from e
