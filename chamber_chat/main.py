import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from pathlib import Path
from uuid import uuid4

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from chamber_chat.container import build_container
from chamber_chat.errors import ChatError
from chamber_chat.schemas import ChatRequest, ChatResponse, ErrorResponse
from chamber_chat.startup_self_check import run_startup_self_check

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

WEB_DIR = Path(__file__).resolve().parent / "web"


@asynccontextmanager
async def lifespan(_app: FastAPI):  # type: ignore[no-untyped-def]
    _app.state.startup_self_check = run_startup_self_check(
        logger=logger,
        completion_client=_app.state.container.completion_client,
    )
    _app.state.started_at = datetime.now(UTC).isoformat()
    yield


app = FastAPI(title="Chamber Chat", version="0.1.0", lifespan=lifespan)
app.state.container = build_container()
app.mount("/web", StaticFiles(directory=WEB_DIR, html=True), name="web")


@app.middleware("http")
async def attach_trace_id(request: Request, call_next):  # type: ignore[no-untyped-def]
    trace_id = request.headers.get("x-trace-id") or str(uuid4())
    request.state.trace_id = trace_id
    response = await call_next(request)
    response.headers["x-trace-id"] = trace_id
    return response


@app.exception_handler(ChatError)
async def chat_error_handler(request: Request, exc: ChatError) -> JSONResponse:
    trace_id = getattr(request.state, "trace_id", None)
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "chat_failed trace_id=%s error=%s detail=%s",
            trace_id,
            type(exc).__name__,
            exc.detail,
        )
    else:
        logger.info("chat_rejected trace_id=%s detail=%s", trace_id, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.public_message).model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(
        "chat_rejected trace_id=%s detail=invalid_body errors=%s",
        getattr(request.state, "trace_id", None),
        len(exc.errors()),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error="Invalid request body").model_dump(),
    )


@app.get("/", include_in_schema=False)
def root() -> RedirectResponse:
    return RedirectResponse(url="/web/")


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok", "service": "chamber-chat"}


@app.get("/api/v1/ops/health")
def ops_health() -> dict[str, object]:
    startup = getattr(app.state, "startup_self_check", None)
    completion_client = app.state.container.completion_client
    reply_catalog = app.state.container.reply_catalog
    startup_payload = (
        {
            "completion_credential_present": startup.completion_credential_present,
            "issues": startup.issues,
        }
        if startup is not None
        else {
            "completion_credential_present": completion_client.configured,
            "issues": ["startup_self_check_not_available"],
        }
    )
    return {
        "status": "degraded" if startup_payload["issues"] else "ok",
        "service": "chamber-chat",
        "timestamp": datetime.now(UTC).isoformat(),
        "started_at": getattr(app.state, "started_at", None),
        "startup_self_check": startup_payload,
        "completion": {
            "model": completion_client.model,
            "url": completion_client.url,
        },
        "reply_catalog": {"entries": len(reply_catalog)},
    }


@app.post(
    "/api/chat",
    response_model=ChatResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def chat(req: ChatRequest, request: Request) -> ChatResponse:
    trace_id = getattr(request.state, "trace_id", str(uuid4()))
    logger.info("chat_request trace_id=%s", trace_id)
    message_router = app.state.container.message_router
    try:
        result = await message_router.route(req.message, trace_id=trace_id)
    except ChatError:
        raise
    except Exception as exc:
        logger.exception("chat_unexpected_error trace_id=%s", trace_id)
        raise ChatError("unexpected_error") from exc
    return ChatResponse(message=result.reply)
