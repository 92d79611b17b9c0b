"""Application service helpers."""

from .media import SUPPORTED_IMAGE_EXTENSIONS, key_from_url, media_url, release_media

__all__ = [
    "SUPPORTED_IMAGE_EXTENSIONS",
    "key_from_url",
    "media_url",
    "release_media",
]
