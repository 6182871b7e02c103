from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

MOVE_PATTERN = re.compile(r"^[1-3],[1-3]$")
FORMAT_ERROR = "Invalid move format. Use coordinates (e.g., 1,2)."


@dataclass(frozen=True)
class ParsedMove:
    """Result of parsing user coordinates. ``row``/``col`` are zero-based."""
    ok: bool
    row: Optional[int] = None
    col: Optional[int] = None
    error: Optional[str] = None


def parse_move(text: str) -> ParsedMove:
    """Parses '<row>,<col>' with 1-based components in 1..3."""
    text = (text or "").strip()
    if not MOVE_PATTERN.match(text):
        return ParsedMove(ok=False, error=FORMAT_ERROR)
    r_s, c_s = text.split(",")
    return ParsedMove(ok=True, row=int(r_s) - 1, col=int(c_s) - 1)
