from __future__ import annotations

from chrono_helper.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from chrono_helper.pipeline.context import PipelineContext


class PipelineStep:
    """
    Pipeline Step 基类

    职责：
      1. 从 ctx 读取上一阶段的结果，写回本阶段的结果
      2. 提供 Step 级时间语义边界（parent scope）

    设计铁律：
      - Step 本身不进入 timeline，只有 leaf timer 记录
      - Instrumentation 是可选横切关注点
      - Step 行为不依赖 inst 是否存在
    """

    def __init__(self, inst: Instrumentation | None = None):
        # 永远保证 inst 可用（No-op 语义）
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        """默认使用类名作为 Step 名称。"""
        return self.__class__.__name__

    def timed(self):
        """Step 级 scope（record=False，不进入 timeline）"""
        return self.inst.timer(self.step_name, record=False)

    def leaf(self, name: str):
        return self.inst.timer(f"{self.step_name}.{name}")

    def run(self, ctx: PipelineContext) -> PipelineContext:
        raise NotImplementedError
