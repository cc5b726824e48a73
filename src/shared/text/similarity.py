"""Token-set text similarity.

Independent of the order domain: pure functions, no shared state.
"""

from __future__ import annotations

import re
from typing import List, Optional

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def tokenize(text: Optional[str]) -> List[str]:
    """Lowercase, split on whitespace and strip non-alphanumerics per token.

    Tokens left empty after stripping are dropped.
    """
    if not text:
        return []
    tokens = (_NON_ALNUM.sub("", word) for word in text.lower().split())
    return [token for token in tokens if token]


def jaccard_similarity(text1: Optional[str], text2: Optional[str]) -> float:
    """Jaccard index of the two token sets; 0.0 if either side is empty."""
    set1 = set(tokenize(text1))
    set2 = set(tokenize(text2))
    if not set1 or not set2:
        return 0.0
    return len(set1 & set2) / len(set1 | set2)
