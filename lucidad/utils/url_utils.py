import base64
import binascii
import logging
import mimetypes
import os
import re
from dataclasses import dataclass

from validators import url as is_valid
from validators import ValidationError

from lucidad.utils.log_utils import setup_logger

logger = setup_logger(__name__, logging.INFO)

DATA_URL_PREFIX = "data:image"
_DATA_URL = re.compile(r"^data:(?P<media_type>image/[\w.+-]+)(?:;[\w.+-]+=[\w.+-]+)*;base64,(?P<data>.+)$",
                       re.DOTALL)


@dataclass
class DataUrl:
    media_type: str
    data: str  # base64, no prefix

    @property
    def size(self) -> int:
        """Approximate decoded size in bytes."""
        return len(self.data) * 3 // 4

    def __str__(self):
        return f"data:{self.media_type};base64,{self.data}"

    def __repr__(self):
        # Payloads can be megabytes; keep them out of logs and tracebacks.
        return f"DataUrl(media_type={self.media_type!r}, size={self.size})"


def validate_url(url):
    """Validate URL format"""
    try:
        return bool(is_valid(url))
    except ValidationError:
        return False


def is_image_data_url(value) -> bool:
    return isinstance(value, str) and value.startswith(DATA_URL_PREFIX)


def parse_data_url(value: str) -> DataUrl:
    """
    Split an image data URL into media type and base64 payload.

    Raises:
        ValueError: if the string is not a base64 image data URL.
    """
    if not is_image_data_url(value):
        raise ValueError("Not an image data URL")
    match = _DATA_URL.match(value)
    if match is None:
        raise ValueError("Image data URL is not base64 encoded")
    data = match.group("data")
    try:
        base64.b64decode(data, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e
    return DataUrl(match.group("media_type").lower(), data)


def to_data_url(content: bytes, media_type: str) -> str:
    if not media_type.startswith("image/"):
        raise ValueError(f"Expected an image media type, got {media_type}")
    return str(DataUrl(media_type, base64.b64encode(content).decode("ascii")))


MAX_UPLOAD_BYTES = 10 * 1024 * 1024


def load_image_file(path: str, max_bytes: int = MAX_UPLOAD_BYTES) -> str:
    """
    Read a local image into a data URL, applying the same policy as the upload button.

    Raises:
        ValueError: if the file is not an image or is larger than max_bytes.
    """
    media_type, _ = mimetypes.guess_type(path)
    if media_type is None or not media_type.startswith("image/"):
        raise ValueError("Please select a valid image file.")
    size = os.path.getsize(path)
    if size > max_bytes:
        raise ValueError(f"File too large. Please use an image under {max_bytes // (1024 * 1024)}MB.")
    with open(path, "rb") as f:
        content = f.read()
    logger.debug(f"Loaded {path} ({media_type}, {size} bytes)")
    return to_data_url(content, media_type)
