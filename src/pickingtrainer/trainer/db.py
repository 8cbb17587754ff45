"""ピッキング練習 SQLite データベース層（商品マスタ・練習履歴）"""

import json
import logging
import sqlite3
from pathlib import Path
from typing import Optional, Union

from .maintenance import migrate_history, migrate_products, trim_history
from .models import MAX_HISTORY

logger = logging.getLogger(__name__)

DB_PATH = Path.cwd() / "picking_trainer.db"


class TrainerDataError(Exception):
    """商品データ・履歴データの読み込みエラー"""
    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = path
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)


def import_products_json(path: Union[str, Path]) -> list[dict]:
    """JSON ファイルから商品リストを読み込む。

    トップレベルが配列、または {"products": [...]} の形式に対応する。

    Raises:
        FileNotFoundError: ファイルが存在しない
        TrainerDataError: JSON として読めない、または商品リストでない
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise TrainerDataError(f"JSON の解析に失敗しました: {e}", path) from e

    if isinstance(data, dict):
        data = data.get("products")
    if not isinstance(data, list):
        raise TrainerDataError("商品リストが見つかりません", path)

    for item in data:
        if not isinstance(item, dict) or "code" not in item:
            raise TrainerDataError("code のない商品があります", path)

    return data


class TrainerDB:
    """商品マスタと練習履歴のデータベース"""

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        self.db_path = Path(db_path) if db_path else DB_PATH
        self._conn: Optional[sqlite3.Connection] = None
        self._init_db()

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = sqlite3.connect(str(self.db_path))
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def _init_db(self):
        """テーブル作成"""
        self.conn.executescript("""
            CREATE TABLE IF NOT EXISTS products (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                code TEXT NOT NULL UNIQUE,
                stock INTEGER NOT NULL,
                data TEXT NOT NULL,
                updated_at TEXT DEFAULT (datetime('now', 'localtime'))
            );

            CREATE TABLE IF NOT EXISTS history (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT,
                mode TEXT,
                data TEXT NOT NULL,
                created_at TEXT DEFAULT (datetime('now', 'localtime'))
            );

            CREATE INDEX IF NOT EXISTS idx_history_user_id ON history(user_id);
        """)
        self.conn.commit()

    def close(self):
        if self._conn:
            self._conn.close()
            self._conn = None

    # ── 商品マスタ ──

    def save_products(self, products: list[dict]) -> int:
        """商品マスタを丸ごと置き換える。登録件数を返す。"""
        products = migrate_products(products)

        self.conn.execute("DELETE FROM products")
        for product in products:
            self.conn.execute("""
                INSERT OR REPLACE INTO products (code, stock, data)
                VALUES (?, ?, ?)
            """, (
                product["code"], product["stock"],
                json.dumps(product, ensure_ascii=False),
            ))
        self.conn.commit()

        logger.info("Saved %d product(s) to %s", len(products), self.db_path)
        return len(products)

    def get_products(self) -> list[dict]:
        """商品マスタを登録順に取得"""
        rows = self.conn.execute(
            "SELECT data FROM products ORDER BY id"
        ).fetchall()
        return migrate_products([json.loads(r["data"]) for r in rows])

    # ── 練習履歴 ──

    def add_history(self, entry: dict) -> int:
        """履歴を1件追加し、最新 MAX_HISTORY 件を超えた古い記録を削除する。

        Returns:
            削除した件数
        """
        self.conn.execute("""
            INSERT INTO history (user_id, mode, data) VALUES (?, ?, ?)
        """, (
            entry.get("userId"), entry.get("mode"),
            json.dumps(entry, ensure_ascii=False),
        ))
        cur = self.conn.execute("""
            DELETE FROM history WHERE id NOT IN (
                SELECT id FROM history ORDER BY id DESC LIMIT ?
            )
        """, (MAX_HISTORY,))
        self.conn.commit()

        if cur.rowcount:
            logger.info("Trimmed %d old history entr(ies)", cur.rowcount)
        return cur.rowcount

    def get_history(self, user_id: Optional[str] = None) -> list[dict]:
        """履歴を古い順に取得（mode 未設定の旧データは移行済みで返す）"""
        if user_id is None:
            rows = self.conn.execute(
                "SELECT data FROM history ORDER BY id"
            ).fetchall()
        else:
            rows = self.conn.execute(
                "SELECT data FROM history WHERE user_id = ? ORDER BY id",
                (user_id,),
            ).fetchall()
        return trim_history(migrate_history([json.loads(r["data"]) for r in rows]))

    def clear_history(self, user_id: Optional[str] = None) -> int:
        """履歴を削除する。削除件数を返す。"""
        if user_id is None:
            cur = self.conn.execute("DELETE FROM history")
        else:
            cur = self.conn.execute(
                "DELETE FROM history WHERE user_id = ?", (user_id,)
            )
        self.conn.commit()
        return cur.rowcount
