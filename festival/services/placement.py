"""Podium scoring convention.

A placement ties together the three flattened columns of a score entry:
``position``, ``medal`` and ``score``. Podium places carry a fixed medal and
take their points from :class:`PodiumPoints`; a participant keeps whatever
score an administrator typed in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..core.config import PODIUM_POINTS
from ..core.errors import ValidationError
from ..models import Medal

PODIUM_POSITIONS: Tuple[int, int, int] = (1, 2, 3)

MEDAL_BY_POSITION: Dict[int, Medal] = {
    1: Medal.GOLD,
    2: Medal.SILVER,
    3: Medal.BRONZE,
}

ORDINALS: Dict[int, str] = {1: "1st", 2: "2nd", 3: "3rd"}


@dataclass(frozen=True)
class PodiumPoints:
    """Points awarded for first, second and third place."""

    first: int = 10
    second: int = 7
    third: int = 5

    @classmethod
    def from_config(cls) -> "PodiumPoints":
        first, second, third = PODIUM_POINTS
        return cls(first=first, second=second, third=third)

    def for_position(self, position: int) -> int:
        if position == 1:
            return self.first
        if position == 2:
            return self.second
        if position == 3:
            return self.third
        raise ValueError(f"No podium points for position {position}")


@dataclass(frozen=True)
class Placement:
    """Either a medal place or a participation score."""

    position: Optional[int]
    medal: Medal
    score: Optional[int] = None

    @classmethod
    def for_position(cls, position: int) -> "Placement":
        if position not in MEDAL_BY_POSITION:
            raise ValueError(f"Position {position} is not a podium place")
        return cls(position=position, medal=MEDAL_BY_POSITION[position])

    @classmethod
    def participant(cls, score: int) -> "Placement":
        return cls(position=None, medal=Medal.NONE, score=score)

    @property
    def is_podium(self) -> bool:
        return self.position is not None

    def points(self, table: PodiumPoints) -> int:
        if self.position is not None:
            return table.for_position(self.position)
        return self.score or 0


GOLD = Placement.for_position(1)
SILVER = Placement.for_position(2)
BRONZE = Placement.for_position(3)


def medal_for_position(position: Optional[int]) -> Medal:
    if position is None:
        return Medal.NONE
    return MEDAL_BY_POSITION.get(position, Medal.NONE)


def check_medal(position: Optional[int], medal: Optional[Medal]) -> Medal:
    """Return the medal to store for ``position``, rejecting mismatches.

    A missing medal is derived from the position. ``none`` fits any position.
    """

    if medal is None:
        return medal_for_position(position)
    medal = Medal(medal)
    if medal is Medal.NONE:
        return medal
    if MEDAL_BY_POSITION.get(position) is not medal:
        raise ValidationError(
            f"Medal '{medal.value}' does not match position {position}",
            {"medal": medal.value, "position": position},
        )
    return medal


def check_score(score: object) -> int:
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValidationError("Score must be an integer", {"score": score})
    if score < 0:
        raise ValidationError("Score must be non-negative", {"score": score})
    return score


def check_position(position: object) -> Optional[int]:
    if position is None:
        return None
    if isinstance(position, bool) or not isinstance(position, int) or position < 1:
        raise ValidationError("Position must be a positive integer", {"position": position})
    return position


__all__ = [
    "BRONZE",
    "GOLD",
    "MEDAL_BY_POSITION",
    "ORDINALS",
    "PODIUM_POSITIONS",
    "Placement",
    "PodiumPoints",
    "SILVER",
    "check_medal",
    "check_position",
    "check_score",
    "medal_for_position",
]
