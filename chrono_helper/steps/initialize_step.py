from __future__ import annotations

from chrono_helper.engines.initializer_engine import InitializerEngine
from chrono_helper.pipeline.context import PipelineContext
from chrono_helper.pipeline.step import PipelineStep
from chrono_helper.utils.logger import logs


class InitializeStep(PipelineStep):
    """
    Semantics:
      params -> ctx.initializer -> ctx.instant（UTC offset）
    """

    def __init__(self, engine: InitializerEngine, inst=None) -> None:
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: PipelineContext) -> PipelineContext:
        with self.timed():
            with self.leaf("resolve"):
                ctx.initializer = self.engine.resolve(ctx.params)

            with self.leaf("execute"):
                ctx.instant = self.engine.execute(ctx.initializer)

        logs.debug(f"[{self.step_name}] {ctx.initializer} -> {ctx.instant}")
        return ctx
