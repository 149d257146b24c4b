from .app_config import AppConfig
from .capability_config import CapabilityConfig
from .log_config import LogConfig

__all__ = ["AppConfig", "CapabilityConfig", "LogConfig"]
