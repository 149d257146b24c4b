from .initialize_step import InitializeStep
from .modify_step import ModifyStep
from .finalize_step import FinalizeStep

__all__ = ["InitializeStep", "ModifyStep", "FinalizeStep"]
