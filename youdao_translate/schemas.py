"""Pydantic data contracts for the Youdao translation client.

Request parameters are frozen once signed; results and batch records are
created once per call and handed back to the caller.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

TranslationKind = Literal["word", "text"]


# --- Signed request (one per HTTP call) ---

class TranslationRequestParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    source_lang: str = "auto"
    target_lang: str = "zh-CHS"
    app_id: str
    salt: str
    signature: str
    sign_type: str = "v3"
    timestamp: str

    def to_payload(self) -> dict[str, str]:
        """Wire body for the vendor endpoint.

        The vendor names the application id field ``appKey``; the secret
        itself never leaves the process.
        """
        return {
            "q": self.text,
            "from": self.source_lang,
            "to": self.target_lang,
            "appKey": self.app_id,
            "salt": self.salt,
            "sign": self.signature,
            "signType": self.sign_type,
            "curtime": self.timestamp,
        }


# --- Uniform result returned to callers ---

class TranslationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    original: str | None = None
    translation: str | None = None
    message: str | None = None

    @classmethod
    def ok(cls, translation: str, original: str | None) -> TranslationResult:
        return cls(success=True, translation=translation, original=original)

    @classmethod
    def fail(cls, message: str, original: str | None = None) -> TranslationResult:
        return cls(success=False, message=message, original=original)

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)


# --- Batch output (one JSONL line per input line) ---

class TranslationRecord(BaseModel):
    line_no: int
    kind: TranslationKind
    original: str
    success: bool
    translation: str | None
    message: str | None
    timestamp: datetime
    latency_ms: int
