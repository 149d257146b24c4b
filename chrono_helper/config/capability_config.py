# chrono_helper/config/capability_config.py
from pydantic import BaseModel


class CapabilityConfig(BaseModel):
    """
    可插拔能力开关：
    - timezone : with_timezone 支持 IANA 命名时区
    - locale   : output_format 支持 locale 参数
    关闭时对应参数返回 UnsupportedCapability
    """

    timezone: bool = True
    locale: bool = True
