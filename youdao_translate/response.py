"""Mapping of vendor JSON replies onto TranslationResult."""

from __future__ import annotations

import logging

from youdao_translate.errors import MalformedResponseError, VendorRejectedError
from youdao_translate.schemas import TranslationResult

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_MESSAGE = "empty response from translation service"
SUCCESS_CODE = "0"


def check_response(data: dict | None, original: str | None) -> TranslationResult:
    """Interpret a reply, raising on anything but a successful translation.

    Raises:
        MalformedResponseError: If the body is empty, not an object, or
            reports success without a translation.
        VendorRejectedError: If the vendor returned a non-"0" error code.
    """
    if not data:
        raise MalformedResponseError(EMPTY_RESPONSE_MESSAGE)
    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"unexpected response type from translation service: {type(data).__name__}"
        )

    error_code = data.get("errorCode")
    if error_code != SUCCESS_CODE:
        raise VendorRejectedError(str(error_code))

    translations = data.get("translation")
    if (
        not isinstance(translations, list)
        or not translations
        or not isinstance(translations[0], str)
    ):
        raise MalformedResponseError("translation service returned no translation")

    return TranslationResult.ok(translation=translations[0], original=original)


def interpret_response(data: dict | None, original: str | None) -> TranslationResult:
    """Interpret a reply into a success or failure result without raising."""
    try:
        return check_response(data, original)
    except VendorRejectedError as e:
        logger.warning(f"Translation rejected: errorCode={e.error_code}, text={original!r}")
        return TranslationResult.fail(str(e), original=original)
    except MalformedResponseError as e:
        logger.warning(f"Malformed translation response: {e}")
        return TranslationResult.fail(str(e), original=original)
