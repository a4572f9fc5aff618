"""
Tournament snapshot and the edits the score sheet applies to it.

Every edit returns a new Tournament; nothing is changed in place. Standings
and the bracket are derived from the full snapshot on demand.
"""
import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Tuple, Union

from scoresheet.models import Bracket, Competitor, Fixture, PlayoffMatch, Playoffs, StandingsRow
from scoresheet.playoffs import PLAYOFF_NODES, resolve_bracket
from scoresheet.roster import generate_fixtures, init_roster
from scoresheet.scores import parse_score
from scoresheet.standings import compute_standings, fixture_winner

logger = logging.getLogger(__name__)


def bracket_from_standings(standings: List[StandingsRow], playoffs: Playoffs) -> Bracket:
    """Resolve the bracket for already computed standings."""
    return resolve_bracket(
        standings,
        playoffs.semifinal1,
        playoffs.semifinal2,
        playoffs.championship,
    )


@dataclass(frozen=True)
class Tournament:
    competitors: Tuple[Competitor, ...] = ()
    fixtures: Tuple[Fixture, ...] = ()
    playoffs: Playoffs = field(default_factory=Playoffs)

    @property
    def team_count(self) -> int:
        return len(self.competitors)

    @property
    def standings(self) -> List[StandingsRow]:
        return compute_standings(self.competitors, self.fixtures)

    @property
    def bracket(self) -> Bracket:
        return bracket_from_standings(self.standings, self.playoffs)

    def to_dict(self) -> Dict:
        return {
            'teams': [c.to_dict() for c in self.competitors],
            'matches': [f.to_dict() for f in self.fixtures],
            'playoffs': self.playoffs.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Tournament':
        competitors = tuple(
            Competitor(id=t['id'], name=t['name'], attributes=t.get('attributes') or {})
            for t in data.get('teams', [])
        )
        fixtures = []
        for m in data.get('matches', []):
            fixture = Fixture(
                team1_index=m['team1'],
                team2_index=m['team2'],
                score1=parse_score(m.get('score1')),
                score2=parse_score(m.get('score2')),
            )
            if not 0 <= fixture.team1_index < fixture.team2_index < len(competitors):
                raise ValueError(f"Invalid pairing {fixture.team1_index}-{fixture.team2_index} "
                                 f"for {len(competitors)} teams")
            fixtures.append(fixture)
        playoff_data = data.get('playoffs', {})
        playoffs = Playoffs(**{
            node: PlayoffMatch(
                score1=parse_score(playoff_data.get(node, {}).get('score1')),
                score2=parse_score(playoff_data.get(node, {}).get('score2')),
            )
            for node in PLAYOFF_NODES
        })
        return cls(competitors=competitors, fixtures=tuple(fixtures), playoffs=playoffs)


def new_tournament(team_count: int) -> Tournament:
    """Fresh roster and fixtures for ``team_count`` teams with no scores."""
    logger.debug("Creating tournament for %d teams", team_count)
    return Tournament(
        competitors=tuple(init_roster(team_count)),
        fixtures=tuple(generate_fixtures(team_count)),
        playoffs=Playoffs(),
    )


def reconfigure(tournament: Tournament, team_count: int) -> Tournament:
    """Replace the whole tournament for a new team count; names and scores are dropped."""
    return new_tournament(team_count)


def reset_tournament(tournament: Tournament) -> Tournament:
    return new_tournament(tournament.team_count)


def rename_competitor(tournament: Tournament, index: int, name: str) -> Tournament:
    if not 0 <= index < tournament.team_count:
        raise IndexError(f"No team at position {index}")
    competitors = list(tournament.competitors)
    competitors[index] = replace(competitors[index], name=name)
    return replace(tournament, competitors=tuple(competitors))


def _check_side(side: int):
    if side not in (1, 2):
        raise ValueError(f"Side must be 1 or 2, got {side!r}")


def record_score(tournament: Tournament, fixture_index: int, side: int,
                 value: Union[str, int, None]) -> Tournament:
    """Set (or clear, for an empty value) one side's score of a round-robin match."""
    _check_side(side)
    if not 0 <= fixture_index < len(tournament.fixtures):
        raise IndexError(f"No match at position {fixture_index}")
    score = parse_score(value)
    fixtures = list(tournament.fixtures)
    fixtures[fixture_index] = replace(fixtures[fixture_index], **{f'score{side}': score})
    return replace(tournament, fixtures=tuple(fixtures))


def record_playoff_score(tournament: Tournament, node: str, side: int,
                         value: Union[str, int, None]) -> Tournament:
    """Set (or clear) one side's score of a playoff match."""
    _check_side(side)
    if node not in PLAYOFF_NODES:
        raise KeyError(node)
    score = parse_score(value)
    match = replace(getattr(tournament.playoffs, node), **{f'score{side}': score})
    return replace(tournament, playoffs=replace(tournament.playoffs, **{node: match}))


def build_view(tournament: Tournament) -> Dict:
    """Everything the score sheet shows, derived from one snapshot."""
    standings = tournament.standings
    bracket = bracket_from_standings(standings, tournament.playoffs)
    matches = []
    for fixture in tournament.fixtures:
        match = fixture.to_dict()
        match['team1_name'] = tournament.competitors[fixture.team1_index].name
        match['team2_name'] = tournament.competitors[fixture.team2_index].name
        match['winner'] = fixture_winner(fixture)
        matches.append(match)
    return {
        'team_count': tournament.team_count,
        'teams': [c.to_dict() for c in tournament.competitors],
        'matches': matches,
        'standings': [row.to_dict() for row in standings],
        'playoffs': tournament.playoffs.to_dict(),
        'bracket': bracket.to_dict(),
    }
