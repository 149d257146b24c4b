#!filepath: chrono_helper/utils/logger.py
import os
import sys
from typing import Optional

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


class Logging:
    """
    日志模块（loguru 封装）
    ---------------------------------------
    - 构造不改动任何 sink：作为库被导入时，宿主已有的 loguru 配置保持不变
    - configure() 才接管全局 logger：stderr + 可选按日期切割的文件 sink
    - 由 init_logging()（CLI 启动时）调用
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

    def configure(self) -> "Logging":
        """
        配置全局 logger（会移除已有 sink）
        """
        logger.remove()

        logger.add(
            sink=sys.stderr,
            level=self.level,
            format=_FORMAT,
            backtrace=False,
            diagnose=False,
        )

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format=_FORMAT,
                enqueue=True,
                backtrace=True,
                diagnose=True,
            )
        return self

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)


def init_logging(cfg) -> Logging:
    """
    根据 LogConfig 配置全局 loguru sink，并替换全局 logs
    """
    global logs
    logs = Logging(
        log_dir=cfg.dir,
        rotation=cfg.rotation,
        retention=cfg.retention,
        log_level=cfg.level,
    ).configure()
    return logs


# 默认全局 logs：只转发到 loguru，不配置 sink
logs = Logging()
