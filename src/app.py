"""
Flask web application for the Tournament Score Sheet.

The working tournament lives in the visitor's session cookie only; closing
the browser discards it.
"""
import os
from functools import wraps
from flask import Flask, request, jsonify, session, g
from scoresheet.config import load_settings
from scoresheet.playoffs import PLAYOFF_NODES
from scoresheet.scores import InvalidScoreError
from scoresheet.state import (
    Tournament,
    build_view,
    new_tournament,
    reconfigure,
    record_playoff_score,
    record_score,
    rename_competitor,
    reset_tournament,
)

app = Flask(__name__)


def _get_secret_key() -> bytes:
    """Get SECRET_KEY from env, or generate one for this process."""
    env_key = os.environ.get('SECRET_KEY')
    if env_key:
        return env_key.encode() if isinstance(env_key, str) else env_key
    return os.urandom(24)


app.secret_key = _get_secret_key()
app.config['SETTINGS'] = load_settings()


def get_settings():
    return app.config['SETTINGS']


def load_tournament() -> Tournament:
    """Load the tournament from the session, starting a fresh one if there is none."""
    data = session.get('tournament')
    if data:
        try:
            return Tournament.from_dict(data)
        except (ValueError, KeyError, TypeError) as e:
            app.logger.warning(f'Discarding unreadable tournament in session: {e}')
    return new_tournament(get_settings()['default_team_count'])


def save_tournament(tournament: Tournament):
    session['tournament'] = tournament.to_dict()


def render_view(tournament: Tournament):
    view = build_view(tournament)
    settings = get_settings()
    view['tournament_name'] = settings['tournament_name']
    view['team_count_options'] = settings['team_count_options']
    return jsonify(view)


def with_tournament(f):
    """Load the session tournament into g.tournament, then save and render what the route returns."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        g.tournament = load_tournament()
        try:
            tournament = f(*args, **kwargs)
        except InvalidScoreError as e:
            app.logger.warning(f'Rejected score on {request.path}: {e}')
            return jsonify({'error': str(e)}), 400
        except IndexError as e:
            return jsonify({'error': str(e)}), 404
        except ValueError as e:
            return jsonify({'error': str(e)}), 400
        if not isinstance(tournament, Tournament):
            return tournament
        save_tournament(tournament)
        return render_view(tournament)
    return decorated_function


def _get_json():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError('Request body must be a JSON object')
    return data


@app.route('/api/tournament', methods=['GET'])
@with_tournament
def api_get_tournament():
    """Current teams, matches, standings and bracket."""
    return g.tournament


@app.route('/api/teams/count', methods=['POST'])
@with_tournament
def api_set_team_count():
    """Start over with a different number of teams."""
    count = _get_json().get('count')
    options = get_settings()['team_count_options']
    if not isinstance(count, int) or isinstance(count, bool) or count not in options:
        raise ValueError(f'Team count must be one of {options}')
    app.logger.info(f'Reconfiguring tournament for {count} teams')
    return reconfigure(g.tournament, count)


@app.route('/api/teams/<int:index>', methods=['POST'])
@with_tournament
def api_rename_team(index):
    name = _get_json().get('name')
    if not isinstance(name, str):
        raise ValueError('Missing team name')
    return rename_competitor(g.tournament, index, name)


def _apply_scores(tournament, data, record):
    """Apply score1/score2 from a request body with ``record(tournament, side, value)``."""
    keys = [key for key in ('score1', 'score2') if key in data]
    if not keys:
        raise ValueError('Missing score1 or score2')
    for key in keys:
        tournament = record(tournament, int(key[-1]), data[key])
    return tournament


@app.route('/api/matches/<int:index>', methods=['POST'])
@with_tournament
def api_save_match_score(index):
    """Save one or both scores of a round-robin match. Empty clears a score."""
    data = _get_json()
    return _apply_scores(
        g.tournament, data,
        lambda t, side, value: record_score(t, index, side, value),
    )


@app.route('/api/playoffs/<node>', methods=['POST'])
@with_tournament
def api_save_playoff_score(node):
    """Save one or both scores of a playoff match."""
    if node not in PLAYOFF_NODES:
        return jsonify({'error': f'Unknown playoff match: {node}'}), 404
    data = _get_json()
    return _apply_scores(
        g.tournament, data,
        lambda t, side, value: record_playoff_score(t, node, side, value),
    )


@app.route('/api/reset', methods=['POST'])
@with_tournament
def api_reset_all():
    """Clear every name and score, keeping the team count."""
    app.logger.info(f'Resetting tournament with {g.tournament.team_count} teams')
    return reset_tournament(g.tournament)


if __name__ == '__main__':
    app.run(debug=os.environ.get('FLASK_DEBUG') == '1')
