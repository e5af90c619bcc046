import logging
import os
import threading
from dataclasses import dataclass, replace, asdict
from typing import Any, Mapping, Optional

import numpy as np

from .scheduling import ThreadingScheduler, ManualScheduler

logger = logging.getLogger(__name__)

SCHEDULERS = {
    'threading': ThreadingScheduler,
    'manual': ManualScheduler,
}

ENV_PREFIX = 'UNDERBAR_'


@dataclass(frozen=True)
class Settings:
    """process-wide defaults for the few operations that need any"""
    random_seed: Optional[int] = None  # seeds the default shuffle generator
    scheduler: str = 'threading'  # threading, manual
    log_level: Optional[str] = None  # applied to the 'underbar' logger when set

    def __post_init__(self):
        if self.scheduler not in SCHEDULERS:
            raise ValueError(f"unknown scheduler '{self.scheduler}', expected one of {sorted(SCHEDULERS)}")
        if self.log_level is not None and not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level '{self.log_level}'")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """read UNDERBAR_RANDOM_SEED, UNDERBAR_SCHEDULER and UNDERBAR_LOG_LEVEL"""
        env = os.environ if environ is None else environ
        seed = env.get(f'{ENV_PREFIX}RANDOM_SEED')
        if seed is not None:
            try:
                seed = int(seed)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}RANDOM_SEED must be an integer, got '{seed}'") from None
        return cls(
            random_seed=seed,
            scheduler=env.get(f'{ENV_PREFIX}SCHEDULER', 'threading').lower(),
            log_level=env.get(f'{ENV_PREFIX}LOG_LEVEL'),
        )


_lock = threading.Lock()
_settings: Optional[Settings] = None
_scheduler = None
_rng: Optional[np.random.Generator] = None


def _apply(settings: Settings) -> None:
    global _settings, _scheduler, _rng
    _settings = settings
    _scheduler = None
    _rng = None
    if settings.log_level is not None:
        logging.getLogger('underbar').setLevel(settings.log_level.upper())
    logger.debug(f"settings: {asdict(settings)}")


def get_settings() -> Settings:
    """the active settings, read from the environment on first use"""
    with _lock:
        if _settings is None:
            _apply(Settings.from_env())
        return _settings


def configure(**overrides: Any) -> Settings:
    """replace the active settings. the default scheduler and generator are rebuilt on next use"""
    current = get_settings()
    updated = replace(current, **overrides)
    with _lock:
        _apply(updated)
    return updated


def default_scheduler():
    """the scheduler delay() uses when none is passed"""
    global _scheduler
    settings = get_settings()
    with _lock:
        if _scheduler is None:
            _scheduler = SCHEDULERS[settings.scheduler]()
        return _scheduler


def default_rng() -> np.random.Generator:
    """the generator shuffle() uses when none is passed"""
    global _rng
    settings = get_settings()
    with _lock:
        if _rng is None:
            _rng = np.random.default_rng(settings.random_seed)
        return _rng
