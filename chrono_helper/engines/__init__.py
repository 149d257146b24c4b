from .base import BaseEngine
from .initializer_engine import InitializerEngine
from .modifier_engine import ModifierEngine
from .finalizer_engine import FinalizerEngine

__all__ = ["BaseEngine", "InitializerEngine", "ModifierEngine", "FinalizerEngine"]
