"""Public package surface for the interchangeable 64-bit PRNG sources."""

from .bits import MAX_UINT63
from .config import SourceConfig, list_sources, new_source
from .lockable import LockableSource
from .sources import PCGSource, Source64, SplitMix64Source, WySource, XOshiro256Source

__all__ = [
    "MAX_UINT63",
    "LockableSource",
    "PCGSource",
    "Source64",
    "SourceConfig",
    "SplitMix64Source",
    "WySource",
    "XOshiro256Source",
    "list_sources",
    "new_source",
]
