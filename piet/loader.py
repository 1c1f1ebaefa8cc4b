"""
Load a program image from a local file or an http(s) URL.
"""

import io
import logging
import os

import httpx
from PIL import Image, UnidentifiedImageError

from .errors import ImageLoadError

logger = logging.getLogger(__name__)

FETCH_TIMEOUT = 30.0


def is_url(source: str) -> bool:
    return source.startswith(('http://', 'https://'))


def fetch_bytes(url: str, timeout: float = FETCH_TIMEOUT) -> bytes:
    """Download raw image bytes."""
    logger.info("Fetching %s", url)
    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise ImageLoadError(f"Failed to fetch image: {e}") from e
    return response.content


def read_bytes(source: str) -> bytes:
    """Raw bytes of a local path or URL."""
    if is_url(source):
        return fetch_bytes(source)

    if not os.path.exists(source):
        raise ImageLoadError(f"Image file not found: {source}")
    with open(source, 'rb') as f:
        return f.read()


def load_image(source: str) -> Image.Image:
    """Decode an image and convert it to RGB."""
    data = read_bytes(source)
    try:
        img = Image.open(io.BytesIO(data))
        return img.convert('RGB')
    except (UnidentifiedImageError, OSError) as e:
        raise ImageLoadError(f"Failed to open image: {e}") from e
