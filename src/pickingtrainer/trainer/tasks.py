"""ランダムタスク生成（在庫台帳なしの練習モード用）"""

import random
from typing import Optional

from .maintenance import effective_stock
from .models import MAX_QUANTITY, Task


def generate_random_task(products: list[dict], rng=None) -> Optional[Task]:
    """ランダムな1タスクを生成する。

    在庫0の商品は除外し、数量は 1〜3 を在庫数で頭打ちにする。
    商品の stock は減らさない。

    Args:
        products: 商品マスタ
        rng: choice / randint を持つ乱数源（省略時は random モジュール）

    Returns:
        Task。在庫のある商品がなければ None
    """
    rng = rng or random
    available = [p for p in products if effective_stock(p) > 0]
    if not available:
        return None

    product = rng.choice(available)
    quantity = min(rng.randint(1, MAX_QUANTITY), effective_stock(product))
    return Task(product=product, quantity=quantity)


def generate_random_tasks(products: list[dict], count: int, rng=None) -> list[Task]:
    """指定数のランダムタスクを生成（生成できなかった分は含めない）"""
    tasks = []
    for _ in range(count):
        task = generate_random_task(products, rng=rng)
        if task:
            tasks.append(task)
    return tasks
