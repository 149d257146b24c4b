from .context import PipelineContext
from .step import PipelineStep
from .pipeline import DateTimePipeline

__all__ = ["PipelineContext", "PipelineStep", "DateTimePipeline"]
