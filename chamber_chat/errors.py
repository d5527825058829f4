from __future__ import annotations


class ChatError(Exception):
    """Base error carrying the HTTP status and the message shown to callers."""

    status_code = 500
    public_message = "Internal Server Error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.public_message
        super().__init__(self.detail)


class InvalidInputError(ChatError):
    status_code = 400
    public_message = "No message provided"


class MissingCredentialError(ChatError):
    public_message = "Missing API Key"


class BackendError(ChatError):
    """Completion backend failed; `detail` is for logs only."""

    public_message = "Error from completion backend"
