# tests/test_client.py
import json
import logging

import httpx
import pytest

from youdao_translate.client import YOUDAO_API_URL, YoudaoTranslator
from youdao_translate.config import Credentials, TranslatorConfig
from youdao_translate.errors import (
    ConfigurationError,
    MalformedResponseError,
    TranslationNetworkError,
    VendorRejectedError,
)
from youdao_translate.signing import canonicalize, sign

APP_ID = "test-app-id"
APP_SECRET = "test-app-secret"


class RecordingTransport:
    """Stub HTTP collaborator: records requests and replies with a canned body."""

    def __init__(self, reply):
        self.reply = reply
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.reply, Exception):
            raise self.reply
        if isinstance(self.reply, httpx.Response):
            return self.reply
        return httpx.Response(200, json=self.reply)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def _translator(recorder: RecordingTransport, **kwargs) -> YoudaoTranslator:
    return YoudaoTranslator(APP_ID, APP_SECRET, transport=recorder.transport(), **kwargs)


class TestYoudaoTranslatorInit:
    def test_missing_app_id(self):
        with pytest.raises(ConfigurationError, match="application id"):
            YoudaoTranslator("", APP_SECRET)

    def test_missing_secret(self):
        with pytest.raises(ConfigurationError, match="secret"):
            YoudaoTranslator(APP_ID, "")

    def test_from_config(self):
        config = TranslatorConfig(endpoint="https://example.test/api", target_lang="ja")
        translator = YoudaoTranslator.from_config(
            config, Credentials(app_id=APP_ID, app_secret=APP_SECRET)
        )
        assert translator._endpoint == "https://example.test/api"
        assert translator._target_lang == "ja"
        assert translator._timeout == 10.0


class TestTranslate:
    @pytest.mark.asyncio
    async def test_end_to_end_success(self):
        recorder = RecordingTransport({"errorCode": "0", "translation": ["你好"]})
        result = await _translator(recorder).translate("hello", "word")
        assert result.to_dict() == {
            "success": True, "translation": "你好", "original": "hello",
        }

    @pytest.mark.asyncio
    async def test_request_is_signed_json_post(self):
        recorder = RecordingTransport({"errorCode": "0", "translation": ["测试"]})
        await _translator(recorder).translate("test")

        assert len(recorder.requests) == 1
        request = recorder.requests[0]
        assert request.method == "POST"
        assert str(request.url) == YOUDAO_API_URL
        assert request.headers["content-type"] == "application/json"

        body = json.loads(request.content)
        assert body["q"] == "test"
        assert body["from"] == "auto"
        assert body["to"] == "zh-CHS"
        assert body["appKey"] == APP_ID
        assert body["signType"] == "v3"
        assert body["sign"] == sign(
            APP_ID, canonicalize("test"), body["salt"], body["curtime"], APP_SECRET
        )

    @pytest.mark.asyncio
    async def test_secret_never_sent(self):
        recorder = RecordingTransport({"errorCode": "0", "translation": ["x"]})
        await _translator(recorder).translate("test")
        assert APP_SECRET.encode() not in recorder.requests[0].content

    @pytest.mark.asyncio
    async def test_each_call_gets_new_salt(self):
        recorder = RecordingTransport({"errorCode": "0", "translation": ["x"]})
        translator = _translator(recorder)
        await translator.translate("same text")
        await translator.translate("same text")
        bodies = [json.loads(r.content) for r in recorder.requests]
        assert bodies[0]["salt"] != bodies[1]["salt"]
        assert bodies[0]["sign"] != bodies[1]["sign"]

    @pytest.mark.asyncio
    async def test_vendor_error_code(self):
        recorder = RecordingTransport({"errorCode": "108"})
        result = await _translator(recorder).translate("test")
        assert result.success is False
        assert result.message == "translation failed: error code 108"
        assert result.original == "test"

    @pytest.mark.asyncio
    async def test_empty_body(self):
        recorder = RecordingTransport(httpx.Response(200, content=b""))
        result = await _translator(recorder).translate("test")
        assert result.success is False
        assert result.message == "empty response from translation service"

    @pytest.mark.asyncio
    async def test_network_error_becomes_failure(self):
        recorder = RecordingTransport(httpx.ConnectError("connection refused"))
        result = await _translator(recorder).translate("test")
        assert result.success is False
        assert result.message.startswith("translation service error:")
        assert "connection refused" in result.message

    @pytest.mark.asyncio
    async def test_http_500_becomes_failure(self):
        recorder = RecordingTransport(httpx.Response(500, text="oops"))
        result = await _translator(recorder).translate("test")
        assert result.success is False
        assert "500" in result.message

    @pytest.mark.asyncio
    async def test_none_text_becomes_failure(self):
        recorder = RecordingTransport({"errorCode": "0", "translation": ["x"]})
        result = await _translator(recorder).translate(None)
        assert result.success is False
        assert "text is required" in result.message
        assert recorder.requests == []


class TestTranslateStrict:
    @pytest.mark.asyncio
    async def test_success(self):
        recorder = RecordingTransport({"errorCode": "0", "translation": ["测试"]})
        result = await _translator(recorder).translate_strict("test")
        assert result.success is True
        assert result.translation == "测试"

    @pytest.mark.asyncio
    async def test_vendor_rejected(self):
        recorder = RecordingTransport({"errorCode": "202"})
        with pytest.raises(VendorRejectedError) as exc_info:
            await _translator(recorder).translate_strict("test")
        assert exc_info.value.error_code == "202"

    @pytest.mark.asyncio
    async def test_network_error(self):
        recorder = RecordingTransport(httpx.ReadTimeout("timed out"))
        with pytest.raises(TranslationNetworkError):
            await _translator(recorder).translate_strict("test")

    @pytest.mark.asyncio
    async def test_http_status_error(self):
        recorder = RecordingTransport(httpx.Response(503))
        with pytest.raises(TranslationNetworkError, match="503"):
            await _translator(recorder).translate_strict("test")

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        recorder = RecordingTransport(httpx.Response(200, text="<html>busy</html>"))
        with pytest.raises(MalformedResponseError, match="invalid JSON"):
            await _translator(recorder).translate_strict("test")

    @pytest.mark.asyncio
    async def test_custom_endpoint(self):
        recorder = RecordingTransport({"errorCode": "0", "translation": ["x"]})
        translator = _translator(recorder, endpoint="https://example.test/api")
        await translator.translate_strict("test")
        assert str(recorder.requests[0].url) == "https://example.test/api"


class TestTimeoutAndLogging:
    @pytest.mark.asyncio
    async def test_configured_timeout_applied_to_request(self):
        recorder = RecordingTransport({"errorCode": "0", "translation": ["x"]})
        config = TranslatorConfig(timeout_seconds=3.5)
        translator = YoudaoTranslator.from_config(
            config,
            Credentials(app_id=APP_ID, app_secret=APP_SECRET),
            transport=recorder.transport(),
        )
        await translator.translate("test")

        timeout = recorder.requests[0].extensions["timeout"]
        assert timeout["connect"] == 3.5
        assert timeout["read"] == 3.5

    @pytest.mark.asyncio
    async def test_secret_never_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="youdao_translate")
        ok = RecordingTransport({"errorCode": "0", "translation": ["测试"]})
        rejected = RecordingTransport({"errorCode": "202"})
        broken = RecordingTransport(httpx.ConnectError("refused"))

        for recorder in (ok, rejected, broken):
            await _translator(recorder).translate("The quick brown fox jumps over the lazy dog")

        assert any("sign=" in r.getMessage() for r in caplog.records)
        for record in caplog.records:
            assert APP_SECRET not in record.getMessage()
            if record.exc_text:
                assert APP_SECRET not in record.exc_text
