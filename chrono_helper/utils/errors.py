# chrono_helper/utils/errors.py
from __future__ import annotations

from typing import Optional


class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided parameters (timestamps, formats, zones...).
    Should NOT print traceback.

    - kind  : 错误类别（MissingParameter / InvalidInteger / ...）
    - param : 触发错误的参数名（可能为 None）
    """

    kind: str = "UserInputError"

    def __init__(self, message: str, param: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.param = param

    def __str__(self) -> str:
        if self.param and f"`{self.param}`" not in self.message:
            return f"{self.message} (parameter `{self.param}`)"
        return self.message


class MissingParameter(UserInputError):
    kind = "MissingParameter"


class InvalidInteger(UserInputError):
    kind = "InvalidInteger"


class InvalidFormat(UserInputError):
    kind = "InvalidFormat"


class OutOfRange(UserInputError):
    kind = "OutOfRange"


class FieldOutOfRange(UserInputError):
    kind = "FieldOutOfRange"


class InvalidTimezone(UserInputError):
    kind = "InvalidTimezone"


class InvalidLocale(UserInputError):
    kind = "InvalidLocale"


class NegativeRange(UserInputError):
    kind = "NegativeRange"


class UnsupportedCapability(UserInputError):
    """A named zone or a locale was requested but the capability is disabled."""

    kind = "UnsupportedCapability"
