"""
Rotating quote selection.
"""

import time
from typing import Optional

QUOTES = (
    "慢慢来，心会跟上。",
    "今天也要好好休息。",
    "深呼吸，然后重新开始。",
    "去喝一杯水，奖励一下自己。",
)


def select_quote(now: Optional[int] = None) -> str:
    """按当前秒数对语录数量取模选择语录"""
    if now is None:
        now = int(time.time())
    return QUOTES[now % len(QUOTES)]
