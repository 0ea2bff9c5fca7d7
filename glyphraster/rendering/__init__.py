from .renderer import image_to_pixels, image_to_raster, raster_to_image
from .view import DEFAULT_SCALE_HEIGHT, DEFAULT_SCALE_WIDTH, RasterImage

__all__ = [
    "DEFAULT_SCALE_HEIGHT",
    "DEFAULT_SCALE_WIDTH",
    "image_to_pixels",
    "image_to_raster",
    "raster_to_image",
    "RasterImage",
]
