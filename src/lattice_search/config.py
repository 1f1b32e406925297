"""
Search configuration.

SearchConfig can be built directly or from environment variables (a .env
file in the working directory is honoured):

    LATTICE_SEARCH_CAPACITY          initial heap capacity (int, >= 0)
    LATTICE_SEARCH_MAX_EXPANSIONS    expansion budget (int > 0, empty = none)
    LATTICE_SEARCH_VERBOSE           log progress at INFO (1/true/yes/on)
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError
from .queue.min_heap import MIN_CAPACITY

ENV_PREFIX = "LATTICE_SEARCH_"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass
class SearchConfig:
    """
    Configuration for an AStar search.

    Attributes:
        capacity: Initial heap capacity hint (default MIN_CAPACITY).
        max_expansions: Stop after expanding this many nodes (None = no limit).
            Off by default; termination on graphs with unbounded path counts
            is otherwise up to the caller.
        verbose: Log progress at INFO instead of DEBUG.
    """
    capacity: int = MIN_CAPACITY
    max_expansions: Optional[int] = None
    verbose: bool = False

    def __post_init__(self):
        if self.capacity < 0:
            raise ConfigurationError(f"capacity must be >= 0, got {self.capacity}")
        if self.max_expansions is not None and self.max_expansions <= 0:
            raise ConfigurationError(
                f"max_expansions must be positive or None, got {self.max_expansions}"
            )

    @classmethod
    def from_env(cls) -> 'SearchConfig':
        """
        Build a config from LATTICE_SEARCH_* environment variables.

        Unset variables keep their defaults.

        Raises:
            ConfigurationError: If a variable cannot be parsed.
        """
        load_dotenv(find_dotenv(usecwd=True))

        kwargs = {}
        capacity = os.getenv(ENV_PREFIX + "CAPACITY")
        if capacity:
            kwargs["capacity"] = _parse_int("CAPACITY", capacity)

        max_expansions = os.getenv(ENV_PREFIX + "MAX_EXPANSIONS")
        if max_expansions:
            kwargs["max_expansions"] = _parse_int("MAX_EXPANSIONS", max_expansions)

        verbose = os.getenv(ENV_PREFIX + "VERBOSE")
        if verbose is not None:
            flag = verbose.strip().lower()
            if flag in _TRUTHY:
                kwargs["verbose"] = True
            elif flag in _FALSY:
                kwargs["verbose"] = False
            else:
                raise ConfigurationError(f"{ENV_PREFIX}VERBOSE: not a boolean: {verbose!r}")

        return cls(**kwargs)


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{ENV_PREFIX}{name}: not an integer: {raw!r}") from exc


__all__ = ['SearchConfig', 'ENV_PREFIX']
