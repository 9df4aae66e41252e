"""Error kinds raised by the strict translation path."""

from __future__ import annotations


class TranslationError(Exception):
    """Base class for everything the translator raises."""


class ConfigurationError(TranslationError):
    pass


class TranslationNetworkError(TranslationError):
    pass


class MalformedResponseError(TranslationError):
    pass


class VendorRejectedError(TranslationError):
    def __init__(self, error_code: str):
        self.error_code = error_code
        super().__init__(f"translation failed: error code {error_code}")
