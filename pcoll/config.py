import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from pcoll.base import Strategy
from pcoll.outcome import Err, Ok, Result

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """CLI defaults, read from the environment (and a ``.env`` file if present)."""

    strategy: Strategy = Strategy.AMORTIZED
    log_level: str = "WARNING"


def load_settings() -> Result[Settings, ValueError]:
    """Read PCOLL_STRATEGY and PCOLL_LOG_LEVEL. Invalid values are an ``Err``."""
    load_dotenv(find_dotenv(usecwd=True))

    raw_strategy = os.environ.get("PCOLL_STRATEGY", Strategy.AMORTIZED.value).strip().lower()
    try:
        strategy = Strategy(raw_strategy)
    except ValueError:
        choices = ", ".join(s.value for s in Strategy)
        return Err(ValueError(f"PCOLL_STRATEGY must be one of {choices}, got '{raw_strategy}'"))

    log_level = os.environ.get("PCOLL_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        return Err(ValueError(f"PCOLL_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got '{log_level}'"))

    return Ok(Settings(strategy=strategy, log_level=log_level))
