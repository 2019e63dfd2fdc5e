"""
Image data interchange helpers.

Images travel through the app as a single string:

    data:<mimetype>;base64,<payload>

``parse_data_uri`` never raises; a string that does not match the pattern
decodes to ``(None, None)``.
"""

import base64
import binascii
import re
from typing import Optional, Tuple

DATA_URI_PATTERN = re.compile(r"data:(.+);base64,(.+)")

DEFAULT_DOWNLOAD_NAME = "clara-ai-mnemonic"

EXTENSIONS = {
    "image/jpeg": "jpeg",
    "image/jpg": "jpeg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
}


def to_data_uri(mime_type: str, payload: str) -> str:
    return f"data:{mime_type};base64,{payload}"


def bytes_to_data_uri(mime_type: str, data: bytes) -> str:
    return to_data_uri(mime_type, base64.b64encode(data).decode("ascii"))


def parse_data_uri(data_uri: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Splits a data URI into (mime_type, base64 payload), or (None, None)."""
    if not isinstance(data_uri, str):
        return None, None
    match = DATA_URI_PATTERN.fullmatch(data_uri)
    if not match:
        return None, None
    return match.group(1), match.group(2)


def decode_image_payload(payload: str) -> bytes:
    """Base64-decodes a payload, tolerating missing ``=`` padding.

    Raises ValueError when it is not valid base64.
    """
    padded = payload + "=" * (-len(payload) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Image payload is not valid base64: {e}") from e


def data_uri_to_bytes(data_uri: str) -> Tuple[str, bytes]:
    mime_type, payload = parse_data_uri(data_uri)
    if not mime_type or not payload:
        raise ValueError("Invalid image data URI.")
    return mime_type, decode_image_payload(payload)


# --- Downloads ---

def slugify(text: Optional[str], max_length: int = 50) -> str:
    """Helper to create safe file names from a scene title."""
    text = (text or "").strip().lower()
    text = re.sub(r"[^a-z0-9\s-]", "", text)
    text = re.sub(r"\s+", "-", text)
    return text[:max_length]


def download_filename(title: Optional[str], mime_type: Optional[str] = None, suffix: str = "") -> str:
    stem = slugify(title) or DEFAULT_DOWNLOAD_NAME
    if suffix:
        return f"{stem}{suffix}"
    return f"{stem}.{EXTENSIONS.get(mime_type or '', 'jpeg')}"
