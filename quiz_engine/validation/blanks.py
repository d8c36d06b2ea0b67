from __future__ import annotations

import re
from typing import List


# Numbered markers first so "__1__" is not read as plain underscores.
BLANK_MARKER_RE = re.compile(
    r"__\d+__"          # __1__, __2__
    r"|_{3,}"           # _____
    r"|\[[^\]]*\]"      # [blank]
    r"|\{[^}]*\}"       # {blank}
    r"|\(\s*\)"         # ( )
)


def detect_blanks(text: str) -> List[str]:
    """Blank markers in reading order. Repeated markers each count as a blank."""
    return BLANK_MARKER_RE.findall(text or "")


def count_blanks(text: str) -> int:
    return len(detect_blanks(text))
