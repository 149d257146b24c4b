# chrono_helper/utils/params.py
from __future__ import annotations

import re
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional

from chrono_helper.utils.errors import InvalidInteger


class IntWidth(Enum):
    """整数参数的宽度（与 hash 参数的解析宽度一一对应）"""

    U32 = ("unsigned 32-bit", 0, 2**32 - 1)
    I32 = ("signed 32-bit", -(2**31), 2**31 - 1)
    U64 = ("unsigned 64-bit", 0, 2**64 - 1)
    I64 = ("signed 64-bit", -(2**63), 2**63 - 1)

    def __init__(self, label: str, lo: int, hi: int):
        self.label = label
        self.lo = lo
        self.hi = hi

    @property
    def signed(self) -> bool:
        return self.lo < 0

    @property
    def digits(self) -> int:
        return len(str(max(-self.lo, self.hi)))


_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_integer(name: str, text: str, width: IntWidth, label: Optional[str] = None) -> int:
    """
    Parse ``text`` as an integer of the given width.

    Only ``[+-]?[0-9]+`` is accepted (no whitespace, underscores or radix
    prefixes); unsigned widths reject a leading ``-``.
    """
    label = label or f"`{name}`"
    if not _INT_RE.fullmatch(text) or (text.startswith("-") and not width.signed):
        raise InvalidInteger(
            f"Invalid {label} parameter: {text!r} is not a valid {width.label} integer",
            param=name,
        )

    # 位数超过宽度上限时直接判定溢出，不做 int() 转换（避免超长数字串）
    negative = text.startswith("-")
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > width.digits:
        value = width.lo - 1 if negative else width.hi + 1
    else:
        value = -int(digits) if negative else int(digits)

    if value > width.hi:
        raise InvalidInteger(
            f"Invalid {label} parameter: number too large to fit in {width.label} integer",
            param=name,
        )
    if value < width.lo:
        raise InvalidInteger(
            f"Invalid {label} parameter: number too small to fit in {width.label} integer",
            param=name,
        )
    return value


def render_value(value: Any) -> str:
    """Render a parameter value to its text form."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    render = getattr(value, "render", None)
    if callable(render):
        return str(render())
    if callable(value):
        return str(value())
    return str(value)


class ParameterSet(Mapping[str, Any]):
    """
    ParameterSet = 一次调用的命名参数（只读）

    设计原则：
    - 调用方构造，core 永不修改
    - 按需渲染（lazy），首次读取后缓存文本
    - 参数“存在”即生效，与取值无关（to_rfc2822=false 仍然命中）
    """

    __slots__ = ("_raw", "_rendered")

    def __init__(self, values: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        raw: Dict[str, Any] = dict(values or {})
        raw.update(kwargs)
        self._raw = raw
        self._rendered: Dict[str, str] = {}

    # -------- Mapping --------
    def __getitem__(self, name: str) -> Any:
        return self._raw[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._raw)

    def __len__(self) -> int:
        return len(self._raw)

    def __repr__(self) -> str:
        return f"ParameterSet({self._raw!r})"

    # -------- helpers --------
    def has(self, name: str) -> bool:
        return name in self._raw

    def text(self, name: str) -> Optional[str]:
        if name not in self._raw:
            return None
        if name not in self._rendered:
            self._rendered[name] = render_value(self._raw[name])
        return self._rendered[name]

    def first_present(self, names: Iterable[str]) -> Optional[str]:
        for name in names:
            if name in self._raw:
                return name
        return None

    @classmethod
    def of(cls, params: "ParameterSet | Mapping[str, Any] | None") -> "ParameterSet":
        if isinstance(params, ParameterSet):
            return params
        return cls(params)
