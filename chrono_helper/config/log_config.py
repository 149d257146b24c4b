#!filepath: chrono_helper/config/log_config.py
from typing import Optional

from pydantic import BaseModel


class LogConfig(BaseModel):
    dir: Optional[str] = None     # None → 只输出 stderr
    rotation: str = "1 day"
    retention: str = "30 days"
    level: str = "WARNING"
