from .instant import Instant, NANOS_PER_SECOND
from .duration import Duration, DurationUnit

__all__ = ["Instant", "Duration", "DurationUnit", "NANOS_PER_SECOND"]
