"""
Roster and round-robin fixture generation.
"""
from itertools import combinations
from typing import List

from scoresheet.models import Competitor, Fixture


def default_team_name(team_id: int) -> str:
    return f"Team {team_id}"


def init_roster(count: int) -> List[Competitor]:
    """Create ``count`` competitors with ids 1..count and zeroed stats."""
    if count < 0:
        raise ValueError(f"Competitor count cannot be negative: {count}")
    return [Competitor(id=i, name=default_team_name(i)) for i in range(1, count + 1)]


def generate_fixtures(count: int) -> List[Fixture]:
    """
    Generate every round-robin pairing for ``count`` competitors.

    Pairs are ordered by first index, then second index, so 4 teams give
    0-1, 0-2, 0-3, 1-2, 1-3, 2-3. All scores start unset.
    """
    if count < 0:
        raise ValueError(f"Competitor count cannot be negative: {count}")
    return [Fixture(team1_index=i, team2_index=j) for i, j in combinations(range(count), 2)]
