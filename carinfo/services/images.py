"""
Purpose:
- Decide which content type the uploaded bytes are tagged with for Gemini.
- Trust the multipart header when it names an image type, otherwise sniff
  the bytes with Pillow. Never rejects an upload; judging the picture is
  the model's job.
"""

from __future__ import annotations
import base64
from io import BytesIO
from typing import Optional
from PIL import Image, UnidentifiedImageError

DEFAULT_MIME_TYPE = "image/jpeg"

def detect_mime_type(raw: bytes, declared: Optional[str] = None) -> str:
    declared = (declared or "").split(";")[0].strip().lower()
    if declared.startswith("image/"):
        return declared
    try:
        with Image.open(BytesIO(raw)) as img:
            fmt = img.format
    except (UnidentifiedImageError, OSError):
        return DEFAULT_MIME_TYPE
    return Image.MIME.get(fmt or "", DEFAULT_MIME_TYPE)

def encode_base64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")
