#!filepath: chrono_helper/pipeline/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from chrono_helper.core.choices import FinalizerChoice, InitializerChoice, Modifier
from chrono_helper.core.instant import Instant
from chrono_helper.utils.params import ParameterSet


@dataclass
class PipelineContext:
    """
    PipelineContext = 一次调用的唯一上下文

    设计原则：
    - Pipeline 负责构造，调用结束即丢弃
    - Step 之间唯一通信载体
    - 不放业务逻辑
    """

    # -------------------------
    # input
    # -------------------------
    params: ParameterSet

    # -------------------------
    # resolved choices
    # -------------------------
    initializer: Optional[InitializerChoice] = None
    modifiers: List[Modifier] = field(default_factory=list)
    finalizer: Optional[FinalizerChoice] = None

    # -------------------------
    # running value / result
    # -------------------------
    instant: Optional[Instant] = None
    output: Optional[str] = None
