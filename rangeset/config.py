from typing import Any, Optional
import dataclasses
from dataclasses import dataclass

import os
import logging

from rangeset.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

################################################################################
# Settings
################################################################################

TRUTHY = {'1', 'true', 'yes', 'on'}
LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}


@dataclass(frozen=True)
class Settings:
    # Verify the disjointness invariants after every mutation (slow, for tests)
    check_invariants: bool = False
    log_level: str = 'WARNING'

    def __post_init__(self):
        if not isinstance(self.check_invariants, bool):
            raise InvalidArgumentError(f"check_invariants must be a bool, got {type(self.check_invariants)}")
        if self.log_level not in LOG_LEVELS:
            raise InvalidArgumentError(f"Invalid log level: {self.log_level}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def load_settings() -> Settings:
    """
    Builds settings from the environment:
      RANGESET_CHECK_INVARIANTS  1/true/yes/on to enable invariant checking
      RANGESET_LOG_LEVEL         DEBUG, INFO, WARNING, ERROR or CRITICAL
    """
    check = os.environ.get('RANGESET_CHECK_INVARIANTS', '').strip().lower() in TRUTHY
    level = os.environ.get('RANGESET_LOG_LEVEL', 'WARNING').strip().upper()
    return Settings(check_invariants=check, log_level=level)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings()
        logger.debug("Loaded settings: %s", _settings)
    return _settings


def configure(**overrides: Any) -> Settings:
    """Replaces fields of the process-wide settings and returns the new value."""
    global _settings
    known = {f.name for f in dataclasses.fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise InvalidArgumentError(f"Unknown settings: {', '.join(sorted(unknown))}")
    _settings = dataclasses.replace(get_settings(), **overrides)
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
