"""Core app services for settings, logging, and image loading."""

from .config import AppConfig, config_path, load_config, save_config
from .errors import ImageLoadError, TermpixError
from .imaging import image_to_pixel_buffer, load_image, load_pixel_buffer, resize_to_width

__all__ = [
    "AppConfig",
    "ImageLoadError",
    "TermpixError",
    "config_path",
    "image_to_pixel_buffer",
    "load_config",
    "load_image",
    "load_pixel_buffer",
    "resize_to_width",
    "save_config",
]
