"""
Shared pytest fixtures for score sheet tests.

Running tests:
    pytest tests/
"""
import pytest
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from scoresheet.models import Competitor, Fixture, PlayoffMatch
from scoresheet.roster import init_roster


@pytest.fixture
def client():
    """Create a test client with an empty session."""
    from app import app
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def four_teams():
    """Four fresh teams named Team 1..Team 4."""
    return init_roster(4)


@pytest.fixture
def named_teams():
    """Four teams with real names, in roster order."""
    return [
        Competitor(id=1, name="Alpha"),
        Competitor(id=2, name="Bravo"),
        Competitor(id=3, name="Charlie"),
        Competitor(id=4, name="Delta"),
    ]


@pytest.fixture
def three_team_results():
    """Three teams with every round-robin match played."""
    teams = init_roster(3)
    fixtures = [
        Fixture(team1_index=0, team2_index=1, score1=30, score2=20),
        Fixture(team1_index=0, team2_index=2, score1=40, score2=25),
        Fixture(team1_index=1, team2_index=2, score1=35, score2=30),
    ]
    return teams, fixtures


@pytest.fixture
def unplayed():
    """A playoff match with no scores entered."""
    return PlayoffMatch()

