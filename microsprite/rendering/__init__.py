from .providers import ColumnPackedProvider, PixelData, PixelDataProvider, RowPackedProvider, get_provider
from .rasterizer import load_bitmap
from .surface import FOREGROUND, RasterSurface, SamplingContext

__all__ = [
    "ColumnPackedProvider",
    "FOREGROUND",
    "PixelData",
    "PixelDataProvider",
    "RasterSurface",
    "RowPackedProvider",
    "SamplingContext",
    "get_provider",
    "load_bitmap",
]
