"""履歴・商品データの移行と上限管理"""

from .models import DEFAULT_MODE, DEFAULT_STOCK, MAX_HISTORY


def effective_stock(product: dict) -> int:
    """商品の実効在庫数（stock 未設定なら DEFAULT_STOCK）"""
    stock = product.get("stock")
    return DEFAULT_STOCK if stock is None else stock


def migrate_history(history: list[dict]) -> list[dict]:
    """履歴データのマイグレーション（mode 未設定は "normal"）"""
    return [
        {**h, "mode": h.get("mode") or DEFAULT_MODE}
        for h in history
    ]


def migrate_products(products: list[dict]) -> list[dict]:
    """商品データのマイグレーション（stock 未設定は 99、0 はそのまま）"""
    return [
        {**p, "stock": effective_stock(p)}
        for p in products
    ]


def trim_history(history: list[dict]) -> list[dict]:
    """履歴データの上限管理（最新 MAX_HISTORY 件を残す）"""
    if len(history) <= MAX_HISTORY:
        return history
    return history[-MAX_HISTORY:]
