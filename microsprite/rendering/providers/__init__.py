from __future__ import annotations

from typing import Callable, Dict

from .base import OPAQUE, TRANSPARENT, PixelData, PixelDataProvider, PixelFrame
from .column import ColumnPackedProvider
from .row import RowPackedProvider

DEFAULT_PROVIDER = "column"

PROVIDERS: Dict[str, Callable[[], PixelDataProvider]] = {
    "column": ColumnPackedProvider,
    "row": RowPackedProvider,
    "row-lsb": lambda: RowPackedProvider(lsb_first=True),
}


def get_provider(name: str = DEFAULT_PROVIDER) -> PixelDataProvider:
    factory = PROVIDERS.get(name)
    if not factory:
        raise ValueError(f"Unknown pixel packing: {name} (choose from {', '.join(sorted(PROVIDERS))})")
    return factory()


__all__ = [
    "ColumnPackedProvider",
    "DEFAULT_PROVIDER",
    "OPAQUE",
    "PROVIDERS",
    "PixelData",
    "PixelDataProvider",
    "PixelFrame",
    "RowPackedProvider",
    "TRANSPARENT",
    "get_provider",
]
