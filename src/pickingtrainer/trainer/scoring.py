"""練習履歴からの自己ベスト算出"""

from typing import Optional

from .models import TIME_ATTACK_MODE


def get_best_score(
    history: list[dict],
    user_id: str,
    mode: str,
    time_limit: Optional[int] = None,
) -> Optional[float]:
    """モード別の自己ベストを取得する。

    タイムアタックで time_limit を指定した場合は、同じ制限時間の記録に絞り
    回答数 (totalAnswered) の最大値を返す。それ以外は score の最大値。

    Args:
        history: 練習履歴
        user_id: ユーザーID
        mode: モード名
        time_limit: タイムアタックの制限時間（秒）

    Returns:
        自己ベスト。該当する記録がなければ None
    """
    filtered = [
        h for h in history
        if h.get("userId") == user_id and h.get("mode") == mode
    ]

    if mode == TIME_ATTACK_MODE and time_limit:
        filtered = [h for h in filtered if h.get("timeLimit") == time_limit]
        if not filtered:
            return None
        return max(h["totalAnswered"] for h in filtered)

    if not filtered:
        return None
    return max(h["score"] for h in filtered)


def get_best_scores(history: list[dict], user_id: str) -> dict[str, float]:
    """ユーザーがプレイした全モードの自己ベストをまとめて返す。

    タイムアタックは制限時間ごとに "timeAttack:<秒>" のキーで集計する。
    """
    best: dict[str, float] = {}
    seen: set[tuple] = set()

    for h in history:
        if h.get("userId") != user_id:
            continue
        mode = h.get("mode")
        limit = (h.get("timeLimit") or None) if mode == TIME_ATTACK_MODE else None
        if (mode, limit) in seen:
            continue
        seen.add((mode, limit))

        if mode == TIME_ATTACK_MODE and limit is None:
            # 制限時間なしの記録だけで集計する
            unlimited = [
                x["score"] for x in history
                if x.get("userId") == user_id and x.get("mode") == mode
                and not x.get("timeLimit")
            ]
            score = max(unlimited) if unlimited else None
        else:
            score = get_best_score(history, user_id, mode, time_limit=limit)
        if score is None:
            continue
        key = f"{mode}:{limit}" if limit else mode
        best[key] = score

    return best
