"""Database model exports."""

from .directory import Community, Sport
from .score_entry import Medal, ScoreEntry

__all__ = [
    "Community",
    "Medal",
    "ScoreEntry",
    "Sport",
]
