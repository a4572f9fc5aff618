"""
Score sheet settings, read from YAML and merged over the defaults.
"""
import logging
import os

import yaml

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = 'SCORESHEET_SETTINGS'


def get_default_settings():
    """Return default settings."""
    return {
        'tournament_name': 'Tournament Score Sheet',
        'default_team_count': 4,
        'team_count_options': [4, 5, 6],
    }


def load_settings(path=None):
    """Load settings from a YAML file, filling in any missing keys from the defaults."""
    defaults = get_default_settings()
    if path is None:
        path = os.environ.get(SETTINGS_ENV_VAR)
    if not path or not os.path.exists(path):
        return defaults
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.warning(f'Failed to parse {path}: {e}')
        return defaults
    if not data:
        return defaults
    if not isinstance(data, dict):
        logger.warning(f'Ignoring {path}: expected a mapping, got {type(data).__name__}')
        return defaults
    for key, value in defaults.items():
        if key not in data:
            data[key] = value
    validate_settings(data)
    return data


def validate_settings(settings):
    """Raise ValueError if the team count settings are inconsistent."""
    options = settings['team_count_options']
    if not options or not all(isinstance(n, int) and not isinstance(n, bool) and n >= 0 for n in options):
        raise ValueError(f"team_count_options must be non-negative integers: {options!r}")
    if settings['default_team_count'] not in options:
        raise ValueError(
            f"default_team_count {settings['default_team_count']!r} is not one of {options!r}"
        )
