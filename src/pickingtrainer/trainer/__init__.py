"""ピッキング練習トレーナー ビジネスロジック"""

from .db import TrainerDataError, TrainerDB, import_products_json
from .formatting import escape_html, format_date, format_duration
from .maintenance import effective_stock, migrate_history, migrate_products, trim_history
from .models import Slip, SlipsSummary, Task
from .render import render_slip_image, save_slip_images
from .scoring import get_best_score, get_best_scores
from .slips import (
    generate_slips,
    generate_task_with_stock,
    get_slips_summary,
    is_all_slips_completed,
)
from .tasks import generate_random_task, generate_random_tasks

__all__ = [
    "Task",
    "Slip",
    "SlipsSummary",
    "TrainerDB",
    "TrainerDataError",
    "import_products_json",
    "get_best_score",
    "get_best_scores",
    "migrate_history",
    "migrate_products",
    "trim_history",
    "effective_stock",
    "generate_random_task",
    "generate_random_tasks",
    "generate_task_with_stock",
    "generate_slips",
    "is_all_slips_completed",
    "get_slips_summary",
    "format_duration",
    "format_date",
    "escape_html",
    "render_slip_image",
    "save_slip_images",
]
