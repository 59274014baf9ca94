"""Engine settings read from the environment / .env file."""

import os
from dataclasses import dataclass
from typing import Callable, TypeVar

from dotenv import load_dotenv

from .cayley_builder import DEFAULT_INITIAL_STEP, DEFAULT_MAX_DEPTH
from .exceptions import ConfigError
from .generator import DEFAULT_MAX_ATTEMPTS

T = TypeVar("T")


@dataclass(frozen=True)
class EngineConfig:
    max_depth: int = DEFAULT_MAX_DEPTH
    initial_step: float = DEFAULT_INITIAL_STEP
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ConfigError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.initial_step <= 0:
            raise ConfigError(f"initial_step must be positive, got {self.initial_step}")
        if self.max_attempts <= 0:
            raise ConfigError(f"max_attempts must be positive, got {self.max_attempts}")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        load_dotenv()
        return cls(
            max_depth=_read("PATHFORMS_MAX_DEPTH", int, DEFAULT_MAX_DEPTH),
            initial_step=_read("PATHFORMS_INITIAL_STEP", float, DEFAULT_INITIAL_STEP),
            max_attempts=_read("PATHFORMS_MAX_ATTEMPTS", int, DEFAULT_MAX_ATTEMPTS),
            seed=_read("PATHFORMS_SEED", int, None),
        )


def _read(name: str, convert: Callable[[str], T], default: T) -> T:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return convert(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} has invalid value {raw!r}") from None
