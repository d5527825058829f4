#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

import httpx

from chamber_chat.intelligence.intent import CANONICAL_QUESTIONS


@dataclass
class ChatCallResult:
    message: str
    ok: bool
    status_code: int | None
    reply: str | None
    error: str | None


def _post_chat(*, client: httpx.Client, base_url: str, message: str) -> ChatCallResult:
    url = f"{base_url.rstrip('/')}/api/chat"
    try:
        resp = client.post(url, json={"message": message})
    except httpx.HTTPError as exc:
        return ChatCallResult(
            message=message,
            ok=False,
            status_code=None,
            reply=None,
            error=f"request_error: {exc}",
        )

    try:
        payload = resp.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}

    reply = payload.get("message")
    if resp.status_code == 200 and isinstance(reply, str) and reply:
        return ChatCallResult(
            message=message,
            ok=True,
            status_code=resp.status_code,
            reply=reply,
            error=None,
        )
    return ChatCallResult(
        message=message,
        ok=False,
        status_code=resp.status_code,
        reply=None,
        error=str(payload.get("error") or f"http_{resp.status_code}"),
    )


def run_smoke(*, client: httpx.Client, base_url: str, messages: list[str]) -> dict[str, object]:
    results = [_post_chat(client=client, base_url=base_url, message=item) for item in messages]
    return {
        "generated_at": datetime.now(UTC).isoformat(),
        "base_url": base_url,
        "total": len(results),
        "failed": sum(not item.ok for item in results),
        "results": [asdict(item) for item in results],
    }


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Post the preset chamber questions to a running chat service")
    parser.add_argument("--base-url", default="http://127.0.0.1:8000")
    parser.add_argument("--timeout-sec", type=float, default=30.0)
    parser.add_argument(
        "--message",
        action="append",
        default=[],
        help="extra message to send after the preset questions (repeatable)",
    )
    parser.add_argument("--skip-presets", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    messages = [] if args.skip_presets else list(CANONICAL_QUESTIONS)
    messages.extend(args.message)
    if not messages:
        print("no messages to send", file=sys.stderr)
        return 2

    with httpx.Client(timeout=httpx.Timeout(timeout=args.timeout_sec)) as client:
        report = run_smoke(client=client, base_url=args.base_url, messages=messages)

    print(json.dumps(report, ensure_ascii=False, indent=2))
    return 0 if report["failed"] == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
