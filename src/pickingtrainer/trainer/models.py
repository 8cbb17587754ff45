"""ピッキング練習 データモデル定義"""

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_STOCK = 99      # stock 未設定の商品の在庫数
MAX_HISTORY = 500       # 履歴の保持件数
MAX_QUANTITY = 3        # 1タスクあたりの最大数量

DEFAULT_MODE = "normal"
TIME_ATTACK_MODE = "timeAttack"


@dataclass
class Task:
    """ピッキング1件分（商品 × 数量）"""
    product: dict
    quantity: int
    completed: bool = False
    found: Optional[bool] = None  # 未回答は None

    def to_dict(self) -> dict:
        return {
            "product": self.product,
            "quantity": self.quantity,
            "completed": self.completed,
            "found": self.found,
        }


@dataclass
class Slip:
    """伝票1枚分"""
    slip_id: str
    slip_number: int
    tasks: list[Task] = field(default_factory=list)
    completed: bool = False

    def to_dict(self) -> dict:
        return {
            "slipId": self.slip_id,
            "slipNumber": self.slip_number,
            "tasks": [t.to_dict() for t in self.tasks],
            "completed": self.completed,
        }


@dataclass
class SlipsSummary:
    """伝票全体の集計結果"""
    total_tasks: int
    completed_tasks: int
    correct_count: int
    all_tasks: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totalTasks": self.total_tasks,
            "completedTasks": self.completed_tasks,
            "correctCount": self.correct_count,
            "allTasks": [
                t.to_dict() if isinstance(t, Task) else t for t in self.all_tasks
            ],
        }
