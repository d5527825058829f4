from __future__ import annotations

import logging
import math
from typing import Any, Protocol

import httpx

from chamber_chat.errors import BackendError, MissingCredentialError

logger = logging.getLogger(__name__)

DEFAULT_COMPLETION_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_COMPLETION_MODEL = "gpt-3.5-turbo"
DEFAULT_TIMEOUT_SEC = 20.0


class CompletionBackend(Protocol):
    async def complete(self, *, system_prompt: str, user_text: str) -> str: ...


class OpenAICompletionClient:
    """
    Chat-completions client for an OpenAI-compatible endpoint.
    Sends one system turn and one user turn, returns the first choice's text.
    """

    def __init__(
        self,
        *,
        api_key: str | None,
        url: str = DEFAULT_COMPLETION_URL,
        model: str = DEFAULT_COMPLETION_MODEL,
        timeout_sec: float = DEFAULT_TIMEOUT_SEC,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = (api_key or "").strip() or None
        self._url = (url or "").strip() or DEFAULT_COMPLETION_URL
        self._model = (model or "").strip() or DEFAULT_COMPLETION_MODEL
        timeout = float(timeout_sec)
        self._timeout_sec = max(timeout, 1.0) if math.isfinite(timeout) else DEFAULT_TIMEOUT_SEC
        self._transport = transport

    @property
    def configured(self) -> bool:
        return self._api_key is not None

    @property
    def model(self) -> str:
        return self._model

    @property
    def url(self) -> str:
        return self._url

    async def complete(self, *, system_prompt: str, user_text: str) -> str:
        if not self._api_key:
            raise MissingCredentialError("completion_credential_missing")

        payload = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_text},
            ],
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }
        logger.info("completion_call model=%s url=%s", self._model, self._url)
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout_sec),
                transport=self._transport,
            ) as client:
                response = await client.post(self._url, json=payload, headers=headers)
        except httpx.TimeoutException as exc:
            raise BackendError(f"completion_timeout:{exc}") from exc
        except httpx.HTTPError as exc:
            raise BackendError(f"completion_request_error:{exc}") from exc

        if not response.is_success:
            logger.error(
                "completion_failed status=%s body=%s",
                response.status_code,
                response.text[:500],
            )
            raise BackendError(f"completion_http_{response.status_code}")

        try:
            data: Any = response.json()
        except ValueError as exc:
            raise BackendError("completion_invalid_json") from exc

        reply = _extract_reply_text(data)
        if reply is None:
            logger.error("completion_failed status=%s body=missing_content", response.status_code)
            raise BackendError("completion_invalid_response")
        return reply


def _extract_reply_text(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if isinstance(content, str) and content.strip():
        return content
    return None
