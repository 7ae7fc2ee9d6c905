"""Runtime settings read from the environment (and a local .env file)."""

import os

from shooting_data.utils.exceptions import ConfigError


_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off'}


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable, raising ConfigError on junk values."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f'{name} must be a boolean flag, got {raw!r}')


def borough_column() -> str:
    # NYPD Shooting Incident (Historic) names the borough field BORO
    return os.getenv('BOROUGH_COLUMN', 'BORO')


def round_expected() -> bool:
    return env_flag('CHISQ_ROUND_EXPECTED', True)


def round_contributions() -> bool:
    # The published report rounded each contribution before summing (5,941)
    return env_flag('CHISQ_ROUND_CONTRIBUTIONS', False)
