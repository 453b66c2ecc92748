"""
Encoding detection for whole-document inputs.

The parser itself is byte-oriented and only decodes completed fields, so
detection happens up front on the raw upload/file bytes.
"""

from __future__ import annotations

import codecs
import logging
from typing import Any, Dict, Optional

from charset_normalizer import from_bytes

from .rules import DEFAULT_ENCODING, ENCODING_AUTO, ENCODING_RAW, UTF8_BOM

logger = logging.getLogger(__name__)


def strip_bom(raw: bytes) -> bytes:
    """Drop a leading UTF-8 BOM so it does not end up in the first field."""
    if raw.startswith(UTF8_BOM):
        return raw[len(UTF8_BOM):]
    return raw


def detect_encoding(raw: bytes) -> tuple[str, Dict[str, Any]]:
    """
    Best-effort encoding detection via charset-normalizer.

    Rules:
    - A UTF-8 BOM wins over detection and reports utf-8.
    - If nothing matches (e.g. empty input), fall back to utf-8.
    - The returned name is the codec's canonical name.
    """
    bom = raw.startswith(UTF8_BOM)
    detected = None
    fallback = False

    if bom:
        encoding = "utf-8"
    else:
        match = from_bytes(raw).best()
        if match is not None:
            detected = match.encoding
            encoding = detected
        else:
            encoding = DEFAULT_ENCODING
            fallback = True

    encoding = codecs.lookup(encoding).name
    logger.debug("detected encoding %s (bom=%s, fallback=%s)", encoding, bom, fallback)

    return encoding, {
        "detected": detected,
        "bom": bom,
        "fallback": fallback,
        "used": encoding,
    }


def resolve_encoding(raw: bytes, requested: str) -> tuple[Optional[str], Dict[str, Any]]:
    """Map a requested encoding ("auto", "raw" or a codec name) to the one to parse with."""
    if requested == ENCODING_AUTO:
        return detect_encoding(raw)
    if requested == ENCODING_RAW:
        return None, {"used": None}
    return requested, {"used": requested}
