"""Request signing for the Youdao v3 signature scheme.

The vendor expects::

    sign = sha256(appKey + input + salt + curtime + appSecret)

where ``input`` is the query shortened to at most 20 characters plus its
length (see ``canonicalize``).
"""

from __future__ import annotations

import hashlib
import time
import uuid

from youdao_translate.schemas import TranslationRequestParams

_CANONICAL_MAX_LEN = 20
_CANONICAL_EDGE = 10


def canonicalize(text: str | None) -> str | None:
    """Shorten text the way the vendor does before signing.

    Texts of 20 characters or fewer are returned unchanged; longer texts
    become the first 10 characters, the full length and the last 10
    characters. ``None`` passes through.
    """
    if text is None:
        return None
    length = len(text)
    if length <= _CANONICAL_MAX_LEN:
        return text
    return f"{text[:_CANONICAL_EDGE]}{length}{text[length - _CANONICAL_EDGE:]}"


def sign(
    app_id: str,
    canonical_text: str,
    salt: str,
    timestamp: str,
    app_secret: str,
) -> str:
    """SHA-256 of the five values concatenated in order, as lowercase hex."""
    sign_str = f"{app_id}{canonical_text}{salt}{timestamp}{app_secret}"
    return hashlib.sha256(sign_str.encode("utf-8")).hexdigest()


def build_request(
    text: str,
    app_id: str,
    app_secret: str,
    *,
    salt: str | None = None,
    timestamp: str | None = None,
    source_lang: str = "auto",
    target_lang: str = "zh-CHS",
) -> TranslationRequestParams:
    """Build the full signed parameter set for one request.

    ``salt`` and ``timestamp`` default to a fresh UUID4 and the current
    Unix time in whole seconds.
    """
    if text is None:
        raise ValueError("text is required")

    if salt is None:
        salt = str(uuid.uuid4())
    if timestamp is None:
        timestamp = str(int(time.time()))

    signature = sign(app_id, canonicalize(text), salt, timestamp, app_secret)

    return TranslationRequestParams(
        text=text,
        source_lang=source_lang,
        target_lang=target_lang,
        app_id=app_id,
        salt=salt,
        signature=signature,
        timestamp=timestamp,
    )
