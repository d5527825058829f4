from pydantic import BaseModel


class ChatRequest(BaseModel):
    message: str | None = None


class ChatResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
