"""
Value records for the score sheet: competitors, fixtures, playoff matches
and the derived standings and bracket views.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Competitor:
    id: int
    name: str
    wins: int = 0
    losses: int = 0
    points_for: int = 0
    points_against: int = 0
    attributes: Dict = field(default_factory=dict, compare=False)

    @property
    def differential(self) -> int:
        return self.points_for - self.points_against

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'name': self.name,
            'attributes': dict(self.attributes),
        }


@dataclass(frozen=True)
class StandingsRow(Competitor):
    """A competitor snapshot with its recomputed stats and 1-based rank."""
    rank: int = 0

    def to_dict(self) -> Dict:
        data = super().to_dict()
        data.update({
            'rank': self.rank,
            'wins': self.wins,
            'losses': self.losses,
            'points_for': self.points_for,
            'points_against': self.points_against,
            'differential': self.differential,
        })
        return data


@dataclass(frozen=True)
class Fixture:
    """An unordered round-robin pairing, referenced by roster position."""
    team1_index: int
    team2_index: int
    score1: Optional[int] = None
    score2: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        return self.score1 is not None and self.score2 is not None

    def to_dict(self) -> Dict:
        return {
            'team1': self.team1_index,
            'team2': self.team2_index,
            'score1': self.score1,
            'score2': self.score2,
        }


@dataclass(frozen=True)
class PlayoffMatch:
    score1: Optional[int] = None
    score2: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        return self.score1 is not None and self.score2 is not None

    def to_dict(self) -> Dict:
        return {'score1': self.score1, 'score2': self.score2}


@dataclass(frozen=True)
class Playoffs:
    semifinal1: PlayoffMatch = PlayoffMatch()
    semifinal2: PlayoffMatch = PlayoffMatch()
    championship: PlayoffMatch = PlayoffMatch()

    def to_dict(self) -> Dict:
        return {
            'semifinal1': self.semifinal1.to_dict(),
            'semifinal2': self.semifinal2.to_dict(),
            'championship': self.championship.to_dict(),
        }


@dataclass(frozen=True)
class Bracket:
    semifinal1: Tuple[str, str]
    semifinal2: Tuple[str, str]
    semifinal1_winner: str
    semifinal2_winner: str
    champion: Optional[str] = None

    @property
    def championship(self) -> Tuple[str, str]:
        return (self.semifinal1_winner, self.semifinal2_winner)

    def to_dict(self) -> Dict:
        return {
            'semifinal1': list(self.semifinal1),
            'semifinal2': list(self.semifinal2),
            'championship': list(self.championship),
            'semifinal1_winner': self.semifinal1_winner,
            'semifinal2_winner': self.semifinal2_winner,
            'champion': self.champion,
        }


def winning_side(match) -> Optional[int]:
    """Return 1 or 2 for the side with the higher score, None if unset or tied.

    Works for any record with ``score1``, ``score2`` and ``is_complete``.
    """
    if not match.is_complete:
        return None
    if match.score1 > match.score2:
        return 1
    if match.score2 > match.score1:
        return 2
    return None
