"""Image decoding and resizing in front of the render pipeline."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from termpix_render.models import PixelBuffer

from .errors import ImageLoadError


RESAMPLING_FILTERS: dict[str, Image.Resampling] = {
    "nearest": Image.Resampling.NEAREST,
    "box": Image.Resampling.BOX,
    "bilinear": Image.Resampling.BILINEAR,
    "hamming": Image.Resampling.HAMMING,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


def load_image(path: Path) -> Image.Image:
    try:
        with Image.open(path) as img:
            img.load()
            return img.convert("RGBA")
    except (FileNotFoundError, IsADirectoryError, PermissionError) as exc:
        raise ImageLoadError(f"Could not open file {path}: {exc.strerror or exc}") from exc
    except UnidentifiedImageError as exc:
        raise ImageLoadError(f"Failed to read image data from {path}: unrecognized format") from exc
    except OSError as exc:
        raise ImageLoadError(f"Failed to decode image data from {path}: {exc}") from exc


def resize_to_width(image: Image.Image, width: int, resize_filter: str = "nearest") -> Image.Image:
    if width < 1:
        raise ValueError(f"Target width must be positive, got {width}")
    try:
        resample = RESAMPLING_FILTERS[resize_filter]
    except KeyError:
        raise ValueError(f"Unknown resize filter: {resize_filter}") from None
    factor = width / image.width
    height = max(1, int(image.height * factor))
    return image.resize((width, height), resample)


def image_to_pixel_buffer(image: Image.Image) -> PixelBuffer:
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return PixelBuffer(width=image.width, height=image.height, data=image.tobytes())


def load_pixel_buffer(
    path: Path,
    width: int | None = None,
    resize_filter: str = "nearest",
) -> PixelBuffer:
    image = load_image(path)
    if width is not None:
        image = resize_to_width(image, width, resize_filter)
    return image_to_pixel_buffer(image)
