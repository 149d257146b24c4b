from __future__ import annotations

from chrono_helper.engines.finalizer_engine import FinalizerEngine
from chrono_helper.pipeline.context import PipelineContext
from chrono_helper.pipeline.step import PipelineStep
from chrono_helper.utils.logger import logs


class FinalizeStep(PipelineStep):
    """
    Semantics:
      params -> ctx.finalizer
      ctx.instant -> ctx.output
    """

    def __init__(self, engine: FinalizerEngine, inst=None) -> None:
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: PipelineContext) -> PipelineContext:
        if ctx.instant is None:
            raise RuntimeError(f"[{self.step_name}] ctx.instant missing, InitializeStep must run first")

        with self.timed():
            with self.leaf("resolve"):
                ctx.finalizer = self.engine.resolve(ctx.params)

            with self.leaf("execute"):
                ctx.output = self.engine.execute(ctx.instant, ctx.finalizer)

        logs.debug(f"[{self.step_name}] {ctx.finalizer} -> {ctx.output!r}")
        return ctx
