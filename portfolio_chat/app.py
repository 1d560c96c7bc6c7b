# ============================================================
# Portfolio Chat FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - /api/chat: message in, Gemini reply out, CORS on every response
#   - settings + model client resolved per request via dependencies
#   - health routes for the hosting platform
# ============================================================

import logging
from json import JSONDecodeError

from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field, StrictStr, ValidationError
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

# --- Local imports ---
from portfolio_chat.errors import (
    ChatProxyError,
    InvalidInput,
    InvalidMethod,
    MissingConfiguration,
    UnexpectedFailure,
)
from portfolio_chat.generate import ChatGenerator, ChatResponse, GeminiClient, PROFILE_CONTEXT
from portfolio_chat.logging_setup import redact_secrets, setup_logging
from portfolio_chat.settings import Settings, get_settings, settings

LOGGER = logging.getLogger("portfolio_chat.app")
setup_logging(settings.LOG_LEVEL)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
CHAT_PATH = "/api/chat"

# ------------------------------------------------------------
# 🔧 Model client + generator (dependencies)
# ------------------------------------------------------------
def get_model_client(cfg: Settings = Depends(get_settings)) -> GeminiClient:
    return GeminiClient(
        api_key=cfg.GEMINI_API_KEY,
        model=cfg.GEMINI_MODEL,
        api_base=cfg.GEMINI_API_BASE,
        timeout=cfg.REQUEST_TIMEOUT,
    )


def get_generator(model_client=Depends(get_model_client)) -> ChatGenerator:
    return ChatGenerator(model_client=model_client, system_instruction=PROFILE_CONTEXT)

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Portfolio Chat API", version="1.0")

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class ChatRequest(BaseModel):
    message: StrictStr = Field(min_length=1)

class ChatPayload(BaseModel):
    reply: str

class ErrorPayload(BaseModel):
    error: str

# ------------------------------------------------------------
# ⚠️ Error mapping
# ------------------------------------------------------------
@app.exception_handler(ChatProxyError)
async def chat_proxy_error_handler(request: Request, exc: ChatProxyError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorPayload(error=exc.message).model_dump(),
        headers=CORS_HEADERS,
    )


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Methods the router itself rejects on the chat path still get the chat error shape."""
    if exc.status_code == 405 and request.url.path == CHAT_PATH:
        return await chat_proxy_error_handler(request, InvalidMethod())
    return await http_exception_handler(request, exc)


async def parse_chat_request(request: Request) -> ChatRequest:
    """Validate the body as {"message": <non-empty string>}; reject anything else."""
    try:
        body = await request.json()
    except (JSONDecodeError, UnicodeDecodeError):
        raise InvalidInput()
    try:
        return ChatRequest.model_validate(body)
    except ValidationError:
        raise InvalidInput()

# ------------------------------------------------------------
# 💬 Main chat route
# ------------------------------------------------------------
@app.api_route(
    CHAT_PATH,
    methods=ALL_METHODS,
    responses={
        200: {"model": ChatPayload},
        400: {"model": ErrorPayload},
        405: {"model": ErrorPayload},
        500: {"model": ErrorPayload},
    },
)
async def chat(
    request: Request,
    cfg: Settings = Depends(get_settings),
    chat_gen: ChatGenerator = Depends(get_generator),
):
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    if request.method != "POST":
        raise InvalidMethod()
    if not cfg.has_api_key:
        raise MissingConfiguration()

    req = await parse_chat_request(request)

    try:
        out: ChatResponse = await run_in_threadpool(chat_gen.chat, req.message)
    except ChatProxyError:
        raise
    except Exception as e:
        # no traceback: requests puts the full URL, key included, in its messages
        LOGGER.error("Chat request failed: %s: %s", type(e).__name__, redact_secrets(str(e)))
        raise UnexpectedFailure()

    LOGGER.debug("Reply generated (meta=%s)", out.meta)
    return JSONResponse(
        status_code=200,
        content=ChatPayload(reply=out.text).model_dump(),
        headers=CORS_HEADERS,
    )

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
    }

@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}

@app.get("/")
def hello():
    return {"message": f"{settings.app_name} service running."}
