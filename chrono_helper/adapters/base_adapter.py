from __future__ import annotations

from chrono_helper.observability.instrumentation import Instrumentation, NoOpInstrumentation


class BaseAdapter:
    """
    Adapter（外部协作方能力：时区库 / locale 数据）的通用接口。

    - 持有 Instrumentation（可选，未提供时为 no-op）
    - timer() 对一次外部查询计时，记为 leaf
    """

    def __init__(self, inst: Instrumentation | None = None):
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    def timer(self, name: str = ''):
        """
            with self.timer("ZoneInfoResolver.resolve"):
                ZoneInfo(name)
        """
        return self.inst.timer(name or self.__class__.__name__)
