#!filepath: chrono_helper/engines/initializer_engine.py
from __future__ import annotations

from chrono_helper.core.choices import (
    FromEpoch,
    FromFormat,
    FromRfc2822,
    FromRfc3339,
    InitializerChoice,
    Now,
)
from chrono_helper.core.instant import Instant
from chrono_helper.engines.base import BaseEngine
from chrono_helper.utils.datetime_utils import DateTimeUtils
from chrono_helper.utils.errors import InvalidFormat, MissingParameter, OutOfRange
from chrono_helper.utils.params import IntWidth, ParameterSet, parse_integer

# (param, unit, label, out-of-range message) —— 顺序即优先级
EPOCH_SOURCES = (
    ("from_timestamp", "seconds", "seconds timestamp",
     "Out-of-range number of seconds"),
    ("from_timestamp_millis", "millis", "milli-seconds timestamp",
     "Out-of-range number of milliseconds"),
    ("from_timestamp_micros", "micros", "micro-seconds timestamp",
     "Number of microseconds would be out of range for a calendar datetime "
     "(more than ca. 262,000 years away from common era)"),
    ("from_timestamp_nanos", "nanos", "nano-seconds timestamp",
     "Out-of-range number of nanoseconds"),
)


class InitializerEngine(BaseEngine[InitializerChoice]):
    """
    InitializerEngine（起始 Instant）

    优先级（先命中者生效，其余忽略）：
      from_timestamp > from_timestamp_millis > from_timestamp_micros
      > from_timestamp_nanos > from_rfc2822 > from_rfc3339
      > from_str + input_format > now()

    所有来源都归一化为 UTC offset。
    """

    def resolve(self, params: ParameterSet) -> InitializerChoice:
        for name, unit, label, _ in EPOCH_SOURCES:
            if params.has(name):
                value = parse_integer(name, params.text(name), IntWidth.I64, label=label)
                return FromEpoch(param=name, value=value, unit=unit)

        if params.has("from_rfc2822"):
            return FromRfc2822(params.text("from_rfc2822"))

        if params.has("from_rfc3339"):
            return FromRfc3339(params.text("from_rfc3339"))

        if params.has("from_str"):
            if not params.has("input_format"):
                raise MissingParameter("Missing `input_format` hash parameter", param="input_format")
            return FromFormat(params.text("from_str"), params.text("input_format"))

        return Now()

    def execute(self, choice: InitializerChoice) -> Instant:
        if isinstance(choice, FromEpoch):
            return self._from_epoch(choice)

        if isinstance(choice, FromRfc2822):
            try:
                return DateTimeUtils.parse_rfc2822(choice.text).with_offset(0)
            except ValueError as e:
                raise InvalidFormat(f"Invalid RFC2822 datetime format: {e}", param="from_rfc2822") from e

        if isinstance(choice, FromRfc3339):
            try:
                return DateTimeUtils.parse_rfc3339(choice.text).with_offset(0)
            except ValueError as e:
                raise InvalidFormat(f"Invalid RFC3339 datetime format: {e}", param="from_rfc3339") from e

        if isinstance(choice, FromFormat):
            try:
                return DateTimeUtils.parse_with_format(choice.text, choice.input_format)
            except ValueError as e:
                raise InvalidFormat(
                    f"Invalid datetime format or format doesn't match input: {e}",
                    param="from_str",
                ) from e

        if isinstance(choice, Now):
            return Instant.now()

        raise TypeError(f"unknown initializer choice: {choice!r}")

    # --------------------------------------------------
    def _from_epoch(self, choice: FromEpoch) -> Instant:
        message = next(msg for name, _, _, msg in EPOCH_SOURCES if name == choice.param)
        try:
            return DateTimeUtils.from_epoch(choice.value, choice.unit)
        except OverflowError as e:
            raise OutOfRange(message, param=choice.param) from e
