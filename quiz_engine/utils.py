from __future__ import annotations

import re
import uuid
from datetime import datetime, timezone
from typing import Iterable, List, Optional


_WS_RE = re.compile(r"\s+")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id(prefix: str = "q") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def is_blank(s: Optional[str]) -> bool:
    return not (s or "").strip()


def normalize_answer(s: Optional[str], *, case_sensitive: bool = False, collapse_ws: bool = False) -> str:
    out = (s or "").strip()
    if collapse_ws:
        out = _WS_RE.sub(" ", out)
    if not case_sensitive:
        out = out.casefold()
    return out


def count_words(text: Optional[str]) -> int:
    t = (text or "").strip()
    return 0 if not t else len(t.split())


def unique_preserving_order(items: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for x in items:
        if x in seen:
            continue
        seen.add(x)
        out.append(x)
    return out


def find_duplicates(items: Iterable[str]) -> List[str]:
    seen = set()
    dups: List[str] = []
    for x in items:
        if x in seen and x not in dups:
            dups.append(x)
        seen.add(x)
    return dups


def plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"
