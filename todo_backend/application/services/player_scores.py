from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

DEFAULT_SCORES: Mapping[str, str] = MappingProxyType({"Pepper": "20", "Floyd": "10"})


class PlayerScores:
    """Read-only player name -> score lookup.

    The table is copied into an immutable mapping at construction, so tests and
    callers can substitute their own scores without touching module state.
    """

    def __init__(self, scores: Optional[Mapping[str, str]] = None) -> None:
        self._scores: Mapping[str, str] = MappingProxyType(
            dict(DEFAULT_SCORES if scores is None else scores)
        )

    @property
    def scores(self) -> Mapping[str, str]:
        return self._scores

    def get_player_score(self, name: str) -> str:
        """Return the score for ``name``, or ``""`` when the player is unknown."""
        return self._scores.get(name, "")
