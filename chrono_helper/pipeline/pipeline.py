#!filepath: chrono_helper/pipeline/pipeline.py
from __future__ import annotations

from typing import Any, Mapping, Optional

from chrono_helper.adapters.locale_formatter import BabelLocaleFormatter, LocaleFormatter
from chrono_helper.adapters.zone_resolver import ZoneInfoResolver, ZoneResolver
from chrono_helper.engines.finalizer_engine import FinalizerEngine
from chrono_helper.engines.initializer_engine import InitializerEngine
from chrono_helper.engines.modifier_engine import ModifierEngine
from chrono_helper.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from chrono_helper.pipeline.context import PipelineContext
from chrono_helper.pipeline.step import PipelineStep
from chrono_helper.utils.errors import UserInputError
from chrono_helper.utils.logger import logs
from chrono_helper.utils.params import ParameterSet


class DateTimePipeline:
    """
    DateTimePipeline = 调度器

    - 顺序固定：initialize → modify → finalize，无回跳 / 循环
    - 首个失败即中止并原样抛出，不产生部分输出
    - Pipeline 不打 Step 级 timer（由 Step 自己定义）
    """

    def __init__(
            self,
            steps: list[PipelineStep],
            inst: Instrumentation | NoOpInstrumentation | None = None,
    ):
        self.steps = steps
        self.inst = inst if inst is not None else NoOpInstrumentation()

    @classmethod
    def build(
            cls,
            zone_resolver: Optional[ZoneResolver] = None,
            locale_formatter: Optional[LocaleFormatter] = None,
            inst: Optional[Instrumentation] = None,
    ) -> "DateTimePipeline":
        # 延迟导入：steps 依赖 pipeline.step
        from chrono_helper.steps import FinalizeStep, InitializeStep, ModifyStep

        if zone_resolver is None:
            zone_resolver = ZoneInfoResolver(inst)
        if locale_formatter is None:
            locale_formatter = BabelLocaleFormatter(inst)

        return cls(
            steps=[
                InitializeStep(InitializerEngine(), inst=inst),
                ModifyStep(ModifierEngine(zone_resolver), inst=inst),
                FinalizeStep(FinalizerEngine(locale_formatter), inst=inst),
            ],
            inst=inst,
        )

    def run(self, params: ParameterSet | Mapping[str, Any] | None) -> PipelineContext:
        ctx = PipelineContext(params=ParameterSet.of(params))

        for step in self.steps:
            try:
                ctx = step.run(ctx)
            except UserInputError as err:
                logs.debug(f"[DateTimePipeline] aborted at {step.step_name} -> {err.kind}: {err}")
                raise

        self.inst.generate_timeline_report("DateTimePipeline")
        return ctx
