"""Signed-request client for the Youdao translation API."""

from youdao_translate.client import YOUDAO_API_URL, YoudaoTranslator
from youdao_translate.schemas import TranslationRequestParams, TranslationResult

__all__ = [
    "YOUDAO_API_URL",
    "YoudaoTranslator",
    "TranslationRequestParams",
    "TranslationResult",
]
