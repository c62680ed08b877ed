import logging
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from moves import Move

# Keep eating until we are this many cells longer than the longest opponent
GROWTH_MARGIN = 2

# Nothing is safe, we're dead anyway
FALLBACK_MOVE = Move.LEFT

TRUTHY = {'1', 'true', 'yes', 'on'}


class ConfigError(ValueError):
    """An environment variable holds a value we can't use."""


@dataclass(frozen=True)
class Settings:
    host: str = '0.0.0.0'
    port: int = 8000
    debug: bool = False
    log_level: str = 'INFO'
    author: str = 'Lethal Lora'
    color: str = '#8ceb34'
    head: str = 'fang'
    tail: str = 'pixel'
    solo_food_seeking: bool = False
    random_seed: Optional[int] = None

    def info(self) -> Dict:
        """Appearance returned from GET /"""
        return {
            "apiversion": "1",
            "author": self.author,
            "color": self.color,
            "head": self.head,
            "tail": self.tail,
        }


def _int(env: Mapping[str, str], key: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(key)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from None


def _bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


def _level(env: Mapping[str, str], key: str, default: str) -> str:
    level = env.get(key, default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{key} must be a logging level name, got {level!r}")
    return level


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from the environment, falling back to the defaults"""
    if env is None:
        env = os.environ
    defaults = Settings()
    return Settings(
        host=env.get('HOST', defaults.host),
        port=_int(env, 'PORT', defaults.port),
        debug=_bool(env, 'DEBUG', defaults.debug),
        log_level=_level(env, 'LOG_LEVEL', defaults.log_level),
        author=env.get('SNAKE_AUTHOR', defaults.author),
        color=env.get('SNAKE_COLOR', defaults.color),
        head=env.get('SNAKE_HEAD', defaults.head),
        tail=env.get('SNAKE_TAIL', defaults.tail),
        solo_food_seeking=_bool(env, 'SOLO_FOOD_SEEKING', defaults.solo_food_seeking),
        random_seed=_int(env, 'RANDOM_SEED', defaults.random_seed),
    )
