from __future__ import annotations

from chrono_helper.engines.modifier_engine import ModifierEngine
from chrono_helper.pipeline.context import PipelineContext
from chrono_helper.pipeline.step import PipelineStep
from chrono_helper.utils.logger import logs


class ModifyStep(PipelineStep):
    """
    Semantics:
      params -> ctx.modifiers
      ctx.instant -> ctx.instant（逐个 modifier 作用）
    """

    def __init__(self, engine: ModifierEngine, inst=None) -> None:
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: PipelineContext) -> PipelineContext:
        if ctx.instant is None:
            raise RuntimeError(f"[{self.step_name}] ctx.instant missing, InitializeStep must run first")

        with self.timed():
            with self.leaf("resolve"):
                ctx.modifiers = self.engine.resolve(ctx.params)

            if not ctx.modifiers:
                logs.debug(f"[{self.step_name}] no modifiers")
                return ctx

            with self.leaf("execute"):
                ctx.instant = self.engine.execute(ctx.instant, ctx.modifiers)

        logs.debug(
            f"[{self.step_name}] applied {[m.param for m in ctx.modifiers]} -> {ctx.instant}"
        )
        return ctx
