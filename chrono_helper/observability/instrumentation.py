#!filepath: chrono_helper/observability/instrumentation.py
from __future__ import annotations

import threading
from collections import OrderedDict
from contextlib import contextmanager
from time import perf_counter
from typing import Dict, Tuple

from chrono_helper.utils.logger import logs


class Instrumentation:
    """
    Instrumentation（leaf 级累计耗时，可跨调用 / 跨线程共享）

    1. 每次 timer() 在自己的栈帧里记录起点，并发调用互不干扰
    2. timeline[name] 累计秒数，calls[name] 累计次数（加锁写入）
    3. record=False 的 timer 只是 parent scope，不记账
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.timeline: Dict[str, float] = OrderedDict()
        self.calls: Dict[str, int] = {}
        self._lock = threading.Lock()

    @contextmanager
    def timer(self, name: str, *, record: bool = True):
        if not self.enabled or not record:
            yield
            return

        t0 = perf_counter()
        try:
            yield
        finally:
            elapsed = perf_counter() - t0
            with self._lock:
                self.timeline[name] = self.timeline.get(name, 0.0) + elapsed
                self.calls[name] = self.calls.get(name, 0) + 1

    def snapshot(self) -> Dict[str, Tuple[int, float]]:
        """leaf → (calls, total seconds)"""
        with self._lock:
            return OrderedDict((name, (self.calls[name], total)) for name, total in self.timeline.items())

    # ---------------------------------------------------------
    # Timeline 输出（冷路径）
    # ---------------------------------------------------------
    def generate_timeline_report(self, label: str = "") -> None:
        snapshot = self.snapshot()
        if not snapshot:
            return
        total = sum(seconds for _, seconds in snapshot.values())
        logs.debug(f"[Timeline] {label} total={total * 1e6:.1f}us")
        for name, (calls, seconds) in snapshot.items():
            logs.debug(f"[Timeline]   {name:<32} calls={calls:<6} avg={seconds / calls * 1e6:>8.1f}us")

    def reset(self) -> None:
        with self._lock:
            self.timeline.clear()
            self.calls.clear()


class NoOpInstrumentation:
    """observability 关闭时使用"""

    @contextmanager
    def timer(self, name: str, *, record: bool = True):
        yield

    def generate_timeline_report(self, label: str = "") -> None:
        pass

    def reset(self) -> None:
        pass
