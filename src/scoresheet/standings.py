"""
Round-robin standings.
"""
import logging
from typing import Dict, List, Optional, Sequence

from scoresheet.models import Competitor, Fixture, StandingsRow, winning_side

logger = logging.getLogger(__name__)


def calculate_differential(points_for: int, points_against: int) -> int:
    return points_for - points_against


def fixture_winner(fixture: Fixture) -> Optional[int]:
    """Winning side of a round-robin match, used to highlight its card."""
    return winning_side(fixture)


def compute_standings(competitors: Sequence[Competitor], fixtures: Sequence[Fixture]) -> List[StandingsRow]:
    """
    Calculate standings from scratch for the given roster and fixtures.

    Stats carried on the input competitors are ignored. Only fixtures with
    both scores set count: the higher score earns a win, a tie adds points
    to both sides without a win or loss.

    Ranking: wins -> point differential. Teams still level keep their
    roster order.
    """
    stats: List[Dict[str, int]] = [
        {'wins': 0, 'losses': 0, 'points_for': 0, 'points_against': 0}
        for _ in competitors
    ]

    completed = 0
    for fixture in fixtures:
        if not fixture.is_complete:
            continue
        completed += 1

        team1 = stats[fixture.team1_index]
        team2 = stats[fixture.team2_index]

        team1['points_for'] += fixture.score1
        team1['points_against'] += fixture.score2
        team2['points_for'] += fixture.score2
        team2['points_against'] += fixture.score1

        winner = fixture_winner(fixture)
        if winner == 1:
            team1['wins'] += 1
            team2['losses'] += 1
        elif winner == 2:
            team2['wins'] += 1
            team1['losses'] += 1

    logger.debug("Recomputed standings for %d teams from %d completed fixtures",
                 len(competitors), completed)

    # sorted() is stable, so equal keys keep roster order
    order = sorted(
        range(len(competitors)),
        key=lambda i: (
            -stats[i]['wins'],
            -calculate_differential(stats[i]['points_for'], stats[i]['points_against']),
        )
    )

    rows = []
    for rank, index in enumerate(order, start=1):
        competitor = competitors[index]
        rows.append(StandingsRow(
            id=competitor.id,
            name=competitor.name,
            attributes=competitor.attributes,
            rank=rank,
            **stats[index]
        ))
    return rows

