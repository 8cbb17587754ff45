#!/usr/bin/env python3
"""
ピッキング練習トレーナー CLI

Usage:
    pickingtrainer import products.json
    pickingtrainer products
    pickingtrainer tasks [--count 10] [--seed 42]
    pickingtrainer slips [--count 3] [--items 5] [--seed 42] [--image-dir [DIR]]
    pickingtrainer record --user U --mode normal --score 80 [--total 10] [--time-limit 60] [--duration-ms 65000]
    pickingtrainer history [--user U]
"""

import argparse
import logging
import random
import sys
from datetime import datetime, timezone

from pickingtrainer.config import settings
from pickingtrainer.logger_config import setup_logging
from pickingtrainer.trainer import (
    TrainerDataError,
    TrainerDB,
    format_date,
    format_duration,
    generate_random_tasks,
    generate_slips,
    get_best_score,
    get_best_scores,
    get_slips_summary,
    import_products_json,
    save_slip_images,
)
from pickingtrainer.trainer.models import TIME_ATTACK_MODE
from pickingtrainer.trainer.render import slip_lines

logger = logging.getLogger(__name__)


def _score(value: str):
    """スコアを数値に変換（整数ならそのまま int）"""
    number = float(value)
    return int(number) if number.is_integer() else number


def _open_db(args) -> TrainerDB:
    return TrainerDB(args.db or settings.TRAINER_DB_PATH)


def _load_products(db: TrainerDB) -> list[dict]:
    products = db.get_products()
    if not products:
        print("商品マスタが空です。先に import コマンドで商品を登録してください。")
    return products


def cmd_import(args):
    """商品マスタを JSON から登録"""
    try:
        products = import_products_json(args.file)
    except FileNotFoundError:
        print(f"エラー: ファイルが見つかりません: {args.file}", file=sys.stderr)
        sys.exit(1)
    except TrainerDataError as e:
        print(f"エラー: {e}", file=sys.stderr)
        sys.exit(1)

    db = _open_db(args)
    count = db.save_products(products)
    print(f"{count} 件の商品を登録しました。")
    db.close()


def cmd_products(args):
    """商品マスタと在庫を表示"""
    db = _open_db(args)
    products = _load_products(db)
    db.close()
    if not products:
        return

    print(f"=== 商品マスタ ({len(products)} 品目) ===\n")
    for p in products:
        name = p.get("name", "")
        location = f" [{p['location']}]" if p.get("location") else ""
        stock = "在庫切れ" if p["stock"] <= 0 else f"在庫 {p['stock']}"
        print(f"  {p['code']}  {name}{location}  {stock}")


def cmd_tasks(args):
    """ランダムな練習タスクを表示"""
    db = _open_db(args)
    products = _load_products(db)
    db.close()
    if not products:
        return

    rng = random.Random(args.seed)
    count = args.count if args.count is not None else settings.TRAINER_TASK_COUNT
    tasks = generate_random_tasks(products, count, rng=rng)
    if not tasks:
        print("在庫のある商品がありません。")
        return

    print(f"=== 練習タスク ({len(tasks)} 件) ===\n")
    for i, task in enumerate(tasks, start=1):
        name = task.product.get("name", "")
        print(f"  {i:>2}. {task.product['code']}  {name}  x{task.quantity}")


def cmd_slips(args):
    """伝票を生成して表示（画像保存も可）"""
    db = _open_db(args)
    products = _load_products(db)
    db.close()
    if not products:
        return

    rng = random.Random(args.seed)
    slip_count = args.count if args.count is not None else settings.TRAINER_SLIP_COUNT
    items = args.items if args.items is not None else settings.TRAINER_ITEMS_PER_SLIP
    slips = generate_slips(products, slip_count, items, rng=rng)

    for slip in slips:
        print(f"【伝票 No.{slip.slip_number}】")
        lines = slip_lines(slip)
        if not lines:
            print("  （在庫切れ）")
        for line in lines:
            print(f"  {line}")
        print()

    summary = get_slips_summary(slips)
    print(f"合計: {len(slips)} 枚 / {summary.total_tasks} 品目")

    if args.image_dir:
        paths = save_slip_images(slips, output_dir=args.image_dir)
        for path in paths:
            print(f"  → 画像保存: {path}")


def cmd_record(args):
    """練習結果を履歴に記録"""
    entry = {
        "userId": args.user,
        "mode": args.mode,
        "score": args.score,
        "totalAnswered": args.total if args.total is not None else 0,
        "date": datetime.now(timezone.utc).isoformat(),
    }
    if args.time_limit is not None:
        entry["timeLimit"] = args.time_limit
    if args.duration_ms is not None:
        entry["durationMs"] = args.duration_ms

    db = _open_db(args)
    previous = get_best_score(db.get_history(args.user), args.user, args.mode, time_limit=args.time_limit)
    db.add_history(entry)
    db.close()

    print(f"記録しました: {args.user} / {args.mode} / スコア {args.score}")
    if args.mode == TIME_ATTACK_MODE and args.time_limit:
        if previous is None or entry["totalAnswered"] > previous:
            print("自己ベスト更新!")
    elif previous is None or args.score > previous:
        print("自己ベスト更新!")


def cmd_history(args):
    """練習履歴と自己ベストを表示"""
    db = _open_db(args)
    history = db.get_history(args.user)
    db.close()

    if not history:
        print("履歴はありません。")
        return

    print(f"=== 練習履歴 ({len(history)} 件) ===\n")
    for h in history:
        date = format_date(h["date"]) if h.get("date") else "-"
        duration = format_duration(h["durationMs"]) if h.get("durationMs") is not None else "-"
        limit = f" 制限{h['timeLimit']}秒" if h.get("timeLimit") else ""
        print(
            f"  {date}  {h.get('userId')}  {h['mode']}{limit}  "
            f"スコア {h.get('score')}  回答 {h.get('totalAnswered')}  時間 {duration}"
        )

    users = [args.user] if args.user else sorted({h.get("userId") for h in history if h.get("userId")})
    print()
    for user in users:
        best = get_best_scores(history, user)
        print(f"【自己ベスト: {user}】")
        for mode, score in sorted(best.items()):
            print(f"  {mode}: {score}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="ピッキング練習トレーナー")
    parser.add_argument("--db", help="データベースのパス (default: $TRAINER_DB_PATH)")
    parser.add_argument("--verbose", "-v", action="store_true", help="詳細ログを表示")
    subparsers = parser.add_subparsers(dest="command")

    # import コマンド
    p_import = subparsers.add_parser("import", help="商品マスタを JSON から登録")
    p_import.add_argument("file", help="商品リストの JSON ファイル")

    # products コマンド
    subparsers.add_parser("products", help="商品マスタを表示")

    # tasks コマンド
    p_tasks = subparsers.add_parser("tasks", help="ランダムな練習タスクを表示")
    p_tasks.add_argument("--count", type=int, help="タスク数")
    p_tasks.add_argument("--seed", type=int, help="乱数シード")

    # slips コマンド
    p_slips = subparsers.add_parser("slips", help="伝票を生成")
    p_slips.add_argument("--count", type=int, help="伝票枚数")
    p_slips.add_argument("--items", type=int, help="1枚あたりの品目数")
    p_slips.add_argument("--seed", type=int, help="乱数シード")
    p_slips.add_argument(
        "--image-dir", nargs="?", const=settings.TRAINER_IMAGE_DIR,
        help="伝票画像の保存先 (値なしの場合: $TRAINER_IMAGE_DIR)",
    )

    # record コマンド
    p_record = subparsers.add_parser("record", help="練習結果を記録")
    p_record.add_argument("--user", required=True, help="ユーザーID")
    p_record.add_argument("--mode", default="normal", help="モード名 (default: normal)")
    p_record.add_argument("--score", type=_score, required=True, help="スコア")
    p_record.add_argument("--total", type=int, help="回答数")
    p_record.add_argument("--time-limit", type=int, help="タイムアタックの制限時間（秒）")
    p_record.add_argument("--duration-ms", type=int, help="所要時間（ミリ秒）")

    # history コマンド
    p_history = subparsers.add_parser("history", help="練習履歴を表示")
    p_history.add_argument("--user", help="ユーザーID")

    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)
    logger.debug("command=%s", args.command)

    if args.command == "import":
        cmd_import(args)
    elif args.command == "products":
        cmd_products(args)
    elif args.command == "tasks":
        cmd_tasks(args)
    elif args.command == "slips":
        cmd_slips(args)
    elif args.command == "record":
        cmd_record(args)
    elif args.command == "history":
        cmd_history(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
