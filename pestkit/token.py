"""Tokens marking where a matched rule starts and ends."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pestkit.position import Position


class TokenKind(Enum):
    """Whether a token opens or closes a matched rule."""

    START = "start"
    END = "end"


@dataclass(frozen=True)
class Token:
    """The start or end of a rule match at a given position."""

    kind: TokenKind
    rule: Any
    pos: Position