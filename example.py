#!/usr/bin/env python3
"""
ピッキング練習 伝票生成サンプル

使い方:
1. .env ファイルに TRAINER_DB_PATH を設定（省略時は ./picking_trainer.db）
2. pickingtrainer import products.json で商品マスタを登録
3. このスクリプトを実行
"""

import random
import sys

from pickingtrainer.config import settings
from pickingtrainer.trainer import (
    TrainerDB,
    format_duration,
    generate_slips,
    get_slips_summary,
    is_all_slips_completed,
    save_slip_images,
)


def main():
    db = TrainerDB(settings.TRAINER_DB_PATH)
    products = db.get_products()
    db.close()

    if not products:
        print("エラー: 商品マスタが空です。先に pickingtrainer import を実行してください。")
        sys.exit(1)

    # 1. 伝票生成
    print("=== 伝票生成 ===")
    slips = generate_slips(products, settings.TRAINER_SLIP_COUNT, settings.TRAINER_ITEMS_PER_SLIP)
    for slip in slips:
        codes = ", ".join(f"{t.product['code']} x{t.quantity}" for t in slip.tasks)
        print(f"  No.{slip.slip_number}: {codes or '（在庫切れ）'}")

    # 2. ランダムに回答して集計
    print("\n=== 回答シミュレーション ===")
    for slip in slips:
        for task in slip.tasks:
            task.completed = True
            task.found = random.random() < 0.8
        slip.completed = True

    summary = get_slips_summary(slips)
    print(f"  完了: {is_all_slips_completed(slips)}")
    print(f"  正解: {summary.correct_count}/{summary.total_tasks}")
    print(f"  所要時間: {format_duration(random.randint(30_000, 300_000))}")

    # 3. 伝票画像を保存
    print("\n=== 伝票画像保存 ===")
    for path in save_slip_images(slips, output_dir=settings.TRAINER_IMAGE_DIR):
        print(f"  → 画像保存: {path}")


if __name__ == "__main__":
    main()
