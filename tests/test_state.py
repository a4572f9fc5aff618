"""
Unit tests for the tournament snapshot and its edit operations.
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from scoresheet.models import Playoffs
from scoresheet.scores import InvalidScoreError
from scoresheet.state import (
    Tournament,
    bracket_from_standings,
    build_view,
    new_tournament,
    reconfigure,
    record_playoff_score,
    record_score,
    rename_competitor,
    reset_tournament,
)


@pytest.fixture
def played():
    """Four renamed teams with some round-robin and playoff scores."""
    t = new_tournament(4)
    for index, name in enumerate(["Alpha", "Bravo", "Charlie", "Delta"]):
        t = rename_competitor(t, index, name)
    t = record_score(t, 0, 1, "21")
    t = record_score(t, 0, 2, "15")
    t = record_playoff_score(t, 'semifinal1', 1, "10")
    t = record_playoff_score(t, 'semifinal1', 2, "20")
    return t


class TestNewTournament:
    """Tests for creating and replacing tournaments."""

    def test_new_tournament(self):
        t = new_tournament(5)
        assert t.team_count == 5
        assert len(t.fixtures) == 10
        assert t.playoffs == Playoffs()

    def test_reset_clears_everything(self, played):
        """Test reset drops names and scores but keeps the team count."""
        t = reset_tournament(played)
        assert t == new_tournament(4)
        assert [c.name for c in t.competitors] == ["Team 1", "Team 2", "Team 3", "Team 4"]
        assert all(not f.is_complete for f in t.fixtures)
        assert t.bracket.semifinal1_winner == "Winner SF1"

    def test_reconfigure_replaces_everything(self, played):
        t = reconfigure(played, 6)
        assert t == new_tournament(6)
        assert len(t.fixtures) == 15


class TestEdits:
    """Tests for renaming and score entry."""

    def test_edits_do_not_change_original(self):
        """Test every edit returns a new snapshot."""
        t = new_tournament(4)
        renamed = rename_competitor(t, 2, "Charlie")
        scored = record_score(t, 1, 1, "9")
        assert t.competitors[2].name == "Team 3"
        assert t.fixtures[1].score1 is None
        assert renamed.competitors[2].name == "Charlie"
        assert scored.fixtures[1].score1 == 9

    def test_rename_keeps_id_and_order(self):
        t = rename_competitor(new_tournament(4), 0, "Alpha")
        assert [c.id for c in t.competitors] == [1, 2, 3, 4]
        assert t.competitors[0].name == "Alpha"

    def test_rename_out_of_range(self):
        with pytest.raises(IndexError):
            rename_competitor(new_tournament(4), 4, "Nobody")

    def test_record_score_both_sides(self):
        t = record_score(new_tournament(3), 2, 1, "35")
        assert not t.fixtures[2].is_complete
        t = record_score(t, 2, 2, "30")
        assert (t.fixtures[2].score1, t.fixtures[2].score2) == (35, 30)
        assert t.standings[0].name == "Team 2"

    def test_clearing_a_score(self):
        """Test an empty value clears a previously entered score."""
        t = record_score(new_tournament(2), 0, 1, "20")
        t = record_score(t, 0, 2, "10")
        t = record_score(t, 0, 1, "")
        assert t.fixtures[0].score1 is None
        assert t.standings[0].wins == 0

    def test_invalid_score_rejected(self):
        with pytest.raises(InvalidScoreError):
            record_score(new_tournament(2), 0, 1, "ten")

    def test_invalid_side_rejected(self):
        with pytest.raises(ValueError):
            record_score(new_tournament(2), 0, 3, "1")

    def test_match_out_of_range(self):
        with pytest.raises(IndexError):
            record_score(new_tournament(2), 1, 1, "1")

    def test_unknown_playoff_node(self):
        with pytest.raises(KeyError):
            record_playoff_score(new_tournament(4), 'final', 1, "1")

    def test_playoff_score(self, played):
        assert played.playoffs.semifinal1.score1 == 10
        assert played.bracket.semifinal1_winner == "Bravo"
        assert played.bracket.champion is None

    def test_rename_flows_into_bracket(self, played):
        """Test a renamed team shows its new name in standings and bracket."""
        t = rename_competitor(played, 1, "Bravo Force")
        assert t.standings[-1].name == "Bravo Force"
        assert t.bracket.semifinal1_winner == "Bravo Force"


class TestSerialization:
    """Tests for the session representation of a tournament."""

    def test_round_trip(self, played):
        assert Tournament.from_dict(played.to_dict()) == played

    def test_empty_dict(self):
        assert Tournament.from_dict({}) == Tournament()

    def test_scores_stored_as_ints(self, played):
        data = played.to_dict()
        assert data['matches'][0] == {'team1': 0, 'team2': 1, 'score1': 21, 'score2': 15}
        assert data['playoffs']['semifinal2'] == {'score1': None, 'score2': None}

    def test_bad_pairing_rejected(self):
        data = new_tournament(2).to_dict()
        data['matches'][0]['team2'] = 5
        with pytest.raises(ValueError):
            Tournament.from_dict(data)

    def test_bad_score_rejected(self):
        data = new_tournament(2).to_dict()
        data['matches'][0]['score1'] = "x"
        with pytest.raises(ValueError):
            Tournament.from_dict(data)


class TestBuildView:
    """Tests for the combined view of a tournament."""

    def test_view_bracket_matches_tournament_bracket(self, played):
        """Test the view and the snapshot resolve the same bracket."""
        assert build_view(played)["bracket"] == played.bracket.to_dict()

    def test_bracket_from_standings(self, played):
        bracket = bracket_from_standings(played.standings, played.playoffs)
        assert bracket == played.bracket
        assert bracket.semifinal1_winner == "Bravo"

    def test_view(self, played):
        view = build_view(played)
        assert view['team_count'] == 4
        assert len(view['matches']) == 6
        first = view['matches'][0]
        assert (first['team1_name'], first['team2_name'], first['winner']) == ("Alpha", "Bravo", 1)
        assert view['standings'][0]['name'] == "Alpha"
        assert view['standings'][0]['differential'] == 6
        assert view['standings'][-1]['name'] == "Bravo"
        assert view['bracket']['semifinal1'] == ["Alpha", "Bravo"]
        assert view['playoffs']['semifinal1'] == {'score1': 10, 'score2': 20}
