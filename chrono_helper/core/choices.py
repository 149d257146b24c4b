from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from chrono_helper.core.duration import Duration
from chrono_helper.core.instant import Instant


# -------------------------
# Initializer
# -------------------------
class InitializerChoice:
    pass


@dataclass(frozen=True)
class FromEpoch(InitializerChoice):
    param: str
    value: int
    unit: str             # seconds / millis / micros / nanos


@dataclass(frozen=True)
class FromRfc2822(InitializerChoice):
    text: str


@dataclass(frozen=True)
class FromRfc3339(InitializerChoice):
    text: str


@dataclass(frozen=True)
class FromFormat(InitializerChoice):
    text: str
    input_format: str


@dataclass(frozen=True)
class Now(InitializerChoice):
    pass


# -------------------------
# Modifier
# -------------------------
class Modifier:
    param: str


@dataclass(frozen=True)
class SetTimezone(Modifier):
    param: str
    kind: str             # local / fixed / zone
    offset_seconds: Optional[int] = None
    zone: Optional[tzinfo] = None


@dataclass(frozen=True)
class SetField(Modifier):
    param: str
    field: str            # ordinal / ordinal0 / year / month / ... / nanosecond
    value: int
    label: str


@dataclass(frozen=True)
class Shift(Modifier):
    param: str
    duration: Duration    # signed; sub_* already negated
    label: str


# -------------------------
# Finalizer
# -------------------------
class FinalizerChoice:
    pass


@dataclass(frozen=True)
class Format(FinalizerChoice):
    pattern: str
    locale: Optional[str] = None


@dataclass(frozen=True)
class ToRfc2822(FinalizerChoice):
    pass


@dataclass(frozen=True)
class ToTimestamp(FinalizerChoice):
    param: str
    unit: str             # seconds / millis / micros / nanos


@dataclass(frozen=True)
class YearsSince(FinalizerChoice):
    base: Instant


@dataclass(frozen=True)
class ToRfc3339(FinalizerChoice):
    pass
