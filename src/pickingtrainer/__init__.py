"""pickingtrainer - ピッキング練習トレーナー（タスク・伝票生成、履歴管理）"""

__version__ = "0.1.0"

from pickingtrainer.trainer import (
    Slip,
    Task,
    TrainerDB,
    generate_random_tasks,
    generate_slips,
    get_best_score,
)

__all__ = [
    "Slip",
    "Task",
    "TrainerDB",
    "generate_random_tasks",
    "generate_slips",
    "get_best_score",
]
