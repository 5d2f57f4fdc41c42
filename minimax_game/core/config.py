"""
Game settings: defaults, validation, YAML loading and `set key = value` updates.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

# Deepest tree we agree to build: 2**(MAX_DEPTH-1) leaves.
MAX_DEPTH = 24


def parse_bool(value: str) -> bool:
    """Parse the literal strings ``true`` / ``false``."""
    if value == "true":
        return True
    if value == "false":
        return False
    raise ConfigError("I do apologize, but I was expecting a boolean type!")


def parse_depth(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        raise ConfigError(
            f'A depth of "{value}" does not make sense to me! I was expecting a positive number!'
        ) from None
    if depth == 0:
        raise ConfigError("Zero is pretty great! Alas it does not make sense as a depth value!")
    if depth < 0:
        raise ConfigError(
            f'A depth of "{value}" does not make sense to me! I was expecting a positive number!'
        )
    if depth > MAX_DEPTH:
        raise ConfigError(
            f"A depth of {depth} would need more leaves than I can count! The deepest I can manage is {MAX_DEPTH}."
        )
    return depth


def parse_seed(value: str) -> Optional[int]:
    if value in ("none", "null"):
        return None
    try:
        seed = int(value)
    except ValueError:
        raise ConfigError(f'"{value}" is not a seed I can use! Try an integer or "none".') from None
    if seed < 0:
        raise ConfigError(f'"{value}" is not a seed I can use! Seeds cannot be negative.')
    return seed


def parse_delay(value: str) -> float:
    try:
        delay = float(value)
    except ValueError:
        raise ConfigError(f'"{value}" is not a delay I understand! I was expecting seconds.') from None
    if delay < 0:
        raise ConfigError("Time only flows one way! The typing delay cannot be negative.")
    return delay


_PARSERS = {
    "depth": parse_depth,
    "singleplayer": parse_bool,
    "root_maximizes": parse_bool,
    "seed": parse_seed,
    "typing_delay": parse_delay,
}


@dataclass(frozen=True)
class GameConfig:
    """Settings for one game; read-only once a game begins."""
    depth: int = 4
    singleplayer: bool = True
    # True iff the player moving at even layers (player One) maximizes.
    root_maximizes: bool = True
    seed: Optional[int] = None
    # Upper bound (seconds) on the per-character delay when typing out computer moves.
    typing_delay: float = 0.0

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if isinstance(self.depth, bool) or not isinstance(self.depth, int) or self.depth < 1:
            raise ConfigError(f"depth must be a positive integer, got {self.depth!r}")
        if self.depth > MAX_DEPTH:
            raise ConfigError(f"depth must be at most {MAX_DEPTH}, got {self.depth}")
        for name in ("singleplayer", "root_maximizes"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a boolean, got {getattr(self, name)!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError(f"seed must be an integer or null, got {self.seed!r}")
        if self.seed is not None and self.seed < 0:
            raise ConfigError(f"seed must be non-negative, got {self.seed}")
        if isinstance(self.typing_delay, bool) or not isinstance(self.typing_delay, (int, float)):
            raise ConfigError(f"typing_delay must be a number, got {self.typing_delay!r}")
        if self.typing_delay < 0:
            raise ConfigError("typing_delay cannot be negative")

    def with_setting(self, key: str, value: str) -> "GameConfig":
        """Return a copy with ``key`` set from its textual ``value``."""
        parser = _PARSERS.get(key)
        if parser is None:
            raise ConfigError(f'"{key}" is not a key I recognize! Perhaps try something else!')
        return replace(self, **{key: parser(value)})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(path: str | Path) -> GameConfig:
    """
    Load a GameConfig from a YAML file.

    The settings may sit at the top level or under a ``game:`` section.
    """
    path = Path(path)
    with path.open() as fh:
        try:
            data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping of settings")
    if "game" in data:
        data = data["game"] or {}
        if not isinstance(data, dict):
            raise ConfigError(f"'game' section in {path} must be a mapping")
    return GameConfig.from_dict(data)
