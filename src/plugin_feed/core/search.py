"""Search key normalization."""

import re
from typing import Any, Optional

_NON_WORD = re.compile(r"\W+")


def normalize_for_search(text: Optional[Any]) -> str:
    """
    Lowercase text and strip everything except letters, digits and underscore.

    Makes search tolerant to spacing and punctuation, e.g. "No Clippy!"
    becomes "noclippy".
    """
    if not text:
        return ""
    return _NON_WORD.sub("", str(text).lower())
