"""Youdao translation API client.

Signs each request with the v3 scheme, POSTs it as JSON and maps the reply
to a TranslationResult. ``translate`` never raises; ``translate_strict``
surfaces the typed errors from ``youdao_translate.errors``.
"""

from __future__ import annotations

import logging

import httpx

from youdao_translate.config import Credentials, TranslatorConfig
from youdao_translate.errors import (
    ConfigurationError,
    MalformedResponseError,
    TranslationNetworkError,
    VendorRejectedError,
)
from youdao_translate.response import EMPTY_RESPONSE_MESSAGE, check_response
from youdao_translate.schemas import TranslationKind, TranslationResult
from youdao_translate.signing import build_request

logger = logging.getLogger(__name__)

YOUDAO_API_URL = "https://openapi.youdao.com/api"


class YoudaoTranslator:
    def __init__(
        self,
        app_id: str,
        app_secret: str,
        *,
        endpoint: str = YOUDAO_API_URL,
        timeout: float = 10.0,
        source_lang: str = "auto",
        target_lang: str = "zh-CHS",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not app_id:
            raise ConfigurationError("Youdao application id is required")
        if not app_secret:
            raise ConfigurationError("Youdao application secret is required")
        self._app_id = app_id
        self._app_secret = app_secret
        self._endpoint = endpoint
        self._timeout = timeout
        self._source_lang = source_lang
        self._target_lang = target_lang
        self._transport = transport

    @classmethod
    def from_config(
        cls,
        config: TranslatorConfig,
        credentials: Credentials,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> YoudaoTranslator:
        return cls(
            app_id=credentials.app_id,
            app_secret=credentials.app_secret,
            endpoint=config.endpoint,
            timeout=config.timeout_seconds,
            source_lang=config.source_lang,
            target_lang=config.target_lang,
            transport=transport,
        )

    async def translate_strict(
        self, text: str, kind: TranslationKind = "text"
    ) -> TranslationResult:
        """Translate text, raising a TranslationError subclass on failure."""
        logger.info(f"Translating {kind}: {text!r}")

        params = build_request(
            text,
            self._app_id,
            self._app_secret,
            source_lang=self._source_lang,
            target_lang=self._target_lang,
        )
        logger.debug(
            f"Signed request: appId={params.app_id}, salt={params.salt}, "
            f"curtime={params.timestamp}, sign={params.signature}"
        )

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self._endpoint,
                    headers={"Content-Type": "application/json"},
                    json=params.to_payload(),
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise TranslationNetworkError(
                f"request to {self._endpoint} failed: {e}"
            ) from e

        if not response.content:
            raise MalformedResponseError(EMPTY_RESPONSE_MESSAGE)
        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"translation service returned invalid JSON: {e}"
            ) from e
        logger.debug(f"Translation response: {data}")

        result = check_response(data, original=text)
        logger.info(f"Translated: {text!r} -> {result.translation!r}")
        return result

    async def translate(
        self, text: str, kind: TranslationKind = "text"
    ) -> TranslationResult:
        """Translate text, returning failures as results instead of raising."""
        try:
            return await self.translate_strict(text, kind)
        except VendorRejectedError as e:
            logger.warning(f"Translation failed: errorCode={e.error_code}, text={text!r}")
            return TranslationResult.fail(str(e), original=text)
        except MalformedResponseError as e:
            logger.warning(f"Translation failed: {e}")
            return TranslationResult.fail(str(e), original=text)
        except Exception as e:
            logger.exception("Translation service error")
            return TranslationResult.fail(
                f"translation service error: {e}", original=text
            )
