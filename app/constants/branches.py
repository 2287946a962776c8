"""
Political branches that receive a generated content pair for every article.

The order here is the order used in the prompt and in the admin view.
"""

from typing import List

# Branch names are matched verbatim; note the plain hyphen in LABUAN.
POLITICAL_BRANCHES: List[str] = [
    "CABANG – KEPONG", "CABANG – BATU", "CABANG – WANGSA MAJU", "CABANG – SEGAMBUT",
    "CABANG – SETIAWANGSA", "CABANG – TITIWANGSA", "CABANG – BUKIT BINTANG",
    "CABANG – LEMBAH PANTAI", "CABANG – SEPUTEH", "CABANG – CHERAS",
    "CABANG – BANDAR TUN RAZAK", "CABANG – PUTRAJAYA", "CABANG - LABUAN",
]

REQUIRED_PAIR_COUNT: int = len(POLITICAL_BRANCHES)
