#!filepath: chrono_helper/engines/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from chrono_helper.utils.params import ParameterSet


Choice = TypeVar("Choice")


class BaseEngine(ABC, Generic[Choice]):
    """
    Engine 抽象基类（Atomic Engine Layer）：

    - 不做任何 I/O
    - resolve(params) : 按固定优先级把参数解析成显式 choice（只做校验，不做运算）
    - execute(...)    : 纯逻辑，只看 choice
    """

    @abstractmethod
    def resolve(self, params: ParameterSet) -> Choice:
        raise NotImplementedError
