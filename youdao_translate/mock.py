"""Mock Youdao endpoint for dry runs and tests without real API calls."""

from __future__ import annotations

import hashlib
import json

import httpx

REQUIRED_FIELDS = ("q", "from", "to", "appKey", "salt", "sign", "signType", "curtime")


def mock_transport(fail_code: str | None = None) -> httpx.MockTransport:
    """Transport that answers like the vendor, deterministically on ``q``.

    Requests missing a wire field get error code 101, the vendor's code for
    a missing parameter. With ``fail_code`` every request is rejected with
    that code.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)

        if any(field not in body for field in REQUIRED_FIELDS):
            return httpx.Response(200, json={"errorCode": "101"})
        if fail_code is not None:
            return httpx.Response(200, json={"errorCode": fail_code})

        h = hashlib.md5(body["q"].encode()).hexdigest()
        return httpx.Response(
            200,
            json={
                "errorCode": "0",
                "query": body["q"],
                "translation": [f"[MOCK-{h[:8]}] {body['q']}"],
            },
        )

    return httpx.MockTransport(handler)
