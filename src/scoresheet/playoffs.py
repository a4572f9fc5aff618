"""
Four-seed playoff bracket: two semifinals feeding a championship.

Semifinal 1 is seed #1 vs seed #4, Semifinal 2 is seed #2 vs seed #3.
Seeds come straight from the round-robin standings.
"""
from typing import Optional, Sequence, Tuple

from scoresheet.models import Bracket, PlayoffMatch, StandingsRow, winning_side

PLACEHOLDER = "TBD"

# Bracket node -> (standings index of side 1, standings index of side 2)
SEMIFINAL_SEEDS = {
    'semifinal1': (0, 3),
    'semifinal2': (1, 2),
}

PENDING_WINNER = {
    'semifinal1': "Winner SF1",
    'semifinal2': "Winner SF2",
}

PLAYOFF_NODES = ('semifinal1', 'semifinal2', 'championship')


def resolve_playoff(match: PlayoffMatch) -> Optional[int]:
    """Return the winning side (1 or 2), or None when unset or tied."""
    return winning_side(match)


def get_seed_name(standings: Sequence[StandingsRow], index: int) -> str:
    """Name of the team at a standings index, or the placeholder if there is none."""
    if 0 <= index < len(standings) and standings[index].name:
        return standings[index].name
    return PLACEHOLDER


def get_semifinal_participants(standings: Sequence[StandingsRow], node: str) -> Tuple[str, str]:
    seed1, seed2 = SEMIFINAL_SEEDS[node]
    return (get_seed_name(standings, seed1), get_seed_name(standings, seed2))


def get_semifinal_winner(standings: Sequence[StandingsRow], node: str, match: PlayoffMatch) -> str:
    """Name of the side that won a semifinal, or the pending label for that slot."""
    winner = resolve_playoff(match)
    if winner is None:
        return PENDING_WINNER[node]
    return get_semifinal_participants(standings, node)[winner - 1]


def resolve_bracket(standings: Sequence[StandingsRow],
                    semifinal1: PlayoffMatch,
                    semifinal2: PlayoffMatch,
                    championship: PlayoffMatch) -> Bracket:
    """
    Resolve every bracket node from the ranked standings and playoff scores.

    A champion is only named when the championship has a strictly higher
    score on one side.
    """
    semifinal1_winner = get_semifinal_winner(standings, 'semifinal1', semifinal1)
    semifinal2_winner = get_semifinal_winner(standings, 'semifinal2', semifinal2)

    champion = None
    final_winner = resolve_playoff(championship)
    if final_winner == 1:
        champion = semifinal1_winner
    elif final_winner == 2:
        champion = semifinal2_winner

    return Bracket(
        semifinal1=get_semifinal_participants(standings, 'semifinal1'),
        semifinal2=get_semifinal_participants(standings, 'semifinal2'),
        semifinal1_winner=semifinal1_winner,
        semifinal2_winner=semifinal2_winner,
        champion=champion,
    )
