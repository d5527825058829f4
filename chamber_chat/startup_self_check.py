from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import urlparse

from chamber_chat.services.completion_client import OpenAICompletionClient


@dataclass(frozen=True)
class StartupSelfCheckResult:
    completion_credential_present: bool
    completion_url: str
    completion_model: str
    issues: list[str]


def run_startup_self_check(
    logger: logging.Logger,
    *,
    completion_client: OpenAICompletionClient,
) -> StartupSelfCheckResult:
    result = analyze_startup_snapshot(
        credential_present=completion_client.configured,
        completion_url=completion_client.url,
        completion_model=completion_client.model,
    )

    if not result.completion_credential_present:
        logger.warning(
            "startup_self_check anomaly=completion_credential_missing "
            "detail=set_OPENAI_API_KEY_greetings_and_general_questions_will_fail"
        )
    if "completion_url_invalid" in result.issues:
        logger.warning(
            "startup_self_check anomaly=completion_url_invalid url=%s",
            result.completion_url,
        )
    if not result.issues:
        logger.info(
            "startup_self_check ok model=%s url=%s",
            result.completion_model,
            result.completion_url,
        )
    return result


def analyze_startup_snapshot(
    *,
    credential_present: bool,
    completion_url: str,
    completion_model: str = "",
) -> StartupSelfCheckResult:
    issues: list[str] = []
    if not credential_present:
        issues.append("completion_credential_missing")
    parsed = urlparse(completion_url or "")
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        issues.append("completion_url_invalid")
    return StartupSelfCheckResult(
        completion_credential_present=credential_present,
        completion_url=completion_url,
        completion_model=completion_model,
        issues=issues,
    )
