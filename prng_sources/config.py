"""Name-based construction of seeded generator sources."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Type

from .bits import MASK64
from .lockable import LockableSource
from .sources import PCGSource, Source64, SplitMix64Source, WySource, XOshiro256Source

logger = logging.getLogger(__name__)

SOURCE_REGISTRY: Dict[str, Type[Source64]] = {
    "splitmix64": SplitMix64Source,
    "xoshiro256": XOshiro256Source,
    "pcg": PCGSource,
    "wyrand": WySource,
}


@dataclass
class SourceConfig:
    """Which engine to build, how to seed it, and whether to lock it."""

    algorithm: str = "xoshiro256"
    seed: int = 0x5EED
    thread_safe: bool = False


def list_sources() -> List[str]:
    """Names accepted by :attr:`SourceConfig.algorithm`."""
    return list(SOURCE_REGISTRY.keys())


def new_source(cfg: SourceConfig) -> Source64:
    """Build and seed the configured engine, wrapped in a lock when asked."""

    try:
        engine_cls = SOURCE_REGISTRY[cfg.algorithm]
    except KeyError:
        raise ValueError(
            f"Unknown PRNG algorithm: {cfg.algorithm!r}. Available: {list_sources()}"
        ) from None

    src: Source64 = engine_cls(cfg.seed)
    logger.debug("built %s seeded with 0x%x", cfg.algorithm, cfg.seed & MASK64)
    if cfg.thread_safe:
        src = LockableSource(src)
    return src
