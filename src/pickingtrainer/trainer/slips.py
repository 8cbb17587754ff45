"""伝票生成と集計（在庫累積チェック付き）"""

import logging
import random
from typing import Optional

from .maintenance import effective_stock
from .models import MAX_QUANTITY, Slip, SlipsSummary, Task

logger = logging.getLogger(__name__)


def generate_task_with_stock(
    products: list[dict],
    remaining_stock: dict[str, int],
    used_codes: Optional[set[str]] = None,
    rng=None,
) -> Optional[Task]:
    """残在庫を考慮して1タスクを生成する。

    Args:
        products: 商品マスタ
        remaining_stock: {code: 残在庫数} の台帳（破壊的に更新される）
        used_codes: 同一伝票内で使用済みの商品コード
        rng: choice / randint を持つ乱数源（省略時は random モジュール）

    Returns:
        Task。候補となる商品がなければ None
    """
    rng = rng or random

    def remaining(product: dict) -> int:
        stock = remaining_stock.get(product["code"])
        return effective_stock(product) if stock is None else stock

    available = [p for p in products if remaining(p) > 0]
    if used_codes:
        available = [p for p in available if p["code"] not in used_codes]
    if not available:
        return None

    product = rng.choice(available)
    stock = remaining(product)
    quantity = min(rng.randint(1, MAX_QUANTITY), stock)
    remaining_stock[product["code"]] = stock - quantity

    return Task(product=product, quantity=quantity)


def generate_slips(
    products: list[dict],
    slip_count: int,
    items_per_slip: int,
    rng=None,
) -> list[Slip]:
    """指定された伝票数・商品数で伝票群を生成する。

    残在庫は伝票をまたいで累積し、1枚の伝票に同じ商品は入らない。
    在庫が尽きた伝票は items_per_slip 未満（0件もあり得る）になる。
    """
    remaining_stock = {p["code"]: effective_stock(p) for p in products}

    slips = []
    for i in range(slip_count):
        tasks = []
        used_codes: set[str] = set()
        for _ in range(items_per_slip):
            task = generate_task_with_stock(products, remaining_stock, used_codes, rng=rng)
            if task is None:
                logger.debug(
                    "slip-%d: no candidate left after %d item(s)", i, len(tasks)
                )
                break
            used_codes.add(task.product["code"])
            tasks.append(task)
        slips.append(Slip(slip_id=f"slip-{i}", slip_number=i + 1, tasks=tasks))

    logger.debug(
        "Generated %d slip(s), %d task(s) in total",
        len(slips), sum(len(s.tasks) for s in slips),
    )
    return slips


def _get(obj, attr: str, key: str):
    """dataclass / dict のどちらからでも値を取り出す"""
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, attr)


def is_all_slips_completed(slips) -> bool:
    """全伝票が完了しているか判定する（伝票がなければ False）"""
    if not slips:
        return False
    return all(_get(slip, "completed", "completed") for slip in slips)


def get_slips_summary(slips) -> SlipsSummary:
    """伝票全体の集計情報を返す"""
    all_tasks = [task for slip in slips for task in _get(slip, "tasks", "tasks")]
    return SlipsSummary(
        total_tasks=len(all_tasks),
        completed_tasks=sum(
            1 for t in all_tasks if _get(t, "completed", "completed") is True
        ),
        correct_count=sum(1 for t in all_tasks if _get(t, "found", "found") is True),
        all_tasks=all_tasks,
    )
