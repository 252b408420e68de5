from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from . import logger

_ENV_PREFIX = "PLANAR_INDEX_"

_DEFAULT_SEED = 42
_DEFAULT_BENCH_POINTS = 10000
_DEFAULT_BENCH_QUERIES = 1000

_log = logger.get_logger("settings")


@dataclass(frozen=True)
class IndexSettings:
    debug: bool = False
    seed: int = _DEFAULT_SEED
    bench_points: int = _DEFAULT_BENCH_POINTS
    bench_queries: int = _DEFAULT_BENCH_QUERIES

    def to_dict(self) -> Dict[str, object]:
        return {
            "debug": self.debug,
            "seed": self.seed,
            "bench_points": self.bench_points,
            "bench_queries": self.bench_queries,
        }


def _read_int(env: Mapping[str, str], name: str, default: int, minimum: int = 0) -> int:
    raw = env.get(_ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        _log.warning("Ignoring %s%s=%r: not an integer", _ENV_PREFIX, name, raw)
        return default
    if value < minimum:
        _log.warning("Ignoring %s%s=%d: below %d", _ENV_PREFIX, name, value, minimum)
        return default
    return value


def get_settings(env: Optional[Mapping[str, str]] = None) -> IndexSettings:
    """Read settings from ``env`` (``os.environ`` by default)."""
    if env is None:
        env = os.environ
    return IndexSettings(
        debug=env.get(_ENV_PREFIX + "DEBUG", "0") == "1",
        seed=_read_int(env, "SEED", _DEFAULT_SEED),
        bench_points=_read_int(env, "BENCH_POINTS", _DEFAULT_BENCH_POINTS, minimum=1),
        bench_queries=_read_int(env, "BENCH_QUERIES", _DEFAULT_BENCH_QUERIES, minimum=1),
    )


def apply_settings(settings: IndexSettings) -> None:
    logger.set_debug(settings.debug)
    _log.debug("Active settings: %s", settings.to_dict())
