# ============================================================
# LLM Gateway FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - x-api-key guard on every LLM route
#   - request normalizers (prompt / messages / full passthrough)
#   - a single ChatGenerator call per request
#   - legacy response envelopes per entry point
# ============================================================

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Dict, Optional
import logging
import time

# --- Local imports ---
from .settings import settings
from .auth import require_api_key
from .errors import (
    GatewayError,
    InternalError,
    MethodNotAllowedError,
    RouteNotFoundError,
    UpstreamError,
    ValidationError,
)
from .envelopes.types import FullPassthrough, MessageList, PromptOnly
from .envelopes.normalize import normalize_full_passthrough, normalize_messages, normalize_prompt
from .envelopes.reconcile import EnvelopeKind, render_success
from .generate import ChatGenerator, GenerationFailure, Message, ModelParams
from .generate.clients.echo_dev_client import EchoDevClient

# ------------------------------------------------------------
# 📝 Logging
# ------------------------------------------------------------
logger = logging.getLogger("llm_gateway")
if not logger.handlers:
    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
    logger.addHandler(h)
logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

# ------------------------------------------------------------
# 🔧 Model client selection (lazy, process-wide)
# ------------------------------------------------------------
@lru_cache(maxsize=1)
def get_model_client():
    if settings.OPENAI_API_KEY or not settings.is_dev:
        from .generate.clients.openai_client import OpenAIClient
        client = OpenAIClient(api_key=settings.OPENAI_API_KEY, timeout=settings.OPENAI_TIMEOUT)
    else:
        logger.warning("OPENAI_API_KEY not set; using EchoDevClient (ENV=%s)", settings.ENV)
        client = EchoDevClient()
    logger.info("Model client: %s", type(client).__name__)
    return client


@lru_cache(maxsize=1)
def get_generator() -> ChatGenerator:
    return ChatGenerator(model_client=get_model_client())

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="LLM Gateway API", version="1.0")

LLM_PREFIX = "/api/llm"
BODY_NOT_OBJECT = "Request body must be a JSON object"


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, status_code, elapsed_ms)

# ------------------------------------------------------------
# ⚠️ Error handlers
# ------------------------------------------------------------
@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.error)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def _method_not_allowed_message(exc: StarletteHTTPException) -> str:
    allow = (getattr(exc, "headers", None) or {}).get("Allow", "")
    methods = sorted(m.strip() for m in allow.split(",") if m.strip() and m.strip() != "HEAD")
    if not methods:
        return "Method not allowed."
    return f"Method not allowed. Use {' or '.join(methods)}."


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        err: GatewayError = RouteNotFoundError(f"Route not found: {request.method} {request.url.path}")
    elif exc.status_code == 405:
        err = MethodNotAllowedError(_method_not_allowed_message(exc))
    else:
        err = GatewayError(str(exc.detail), status_code=exc.status_code)
    return JSONResponse(status_code=err.status_code, content=err.to_body(), headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    err = InternalError("Internal server error", error=str(exc) if settings.expose_errors else None)
    return JSONResponse(status_code=err.status_code, content=err.to_body())

# ------------------------------------------------------------
# 📦 Request body
# ------------------------------------------------------------
async def read_json_body(request: Request) -> Any:
    """Parse the body after the auth guard has run; empty body -> None."""
    if not (await request.body()).strip():
        return None
    try:
        return await request.json()
    except ValueError:
        raise ValidationError(BODY_NOT_OBJECT)


def _validate(model_cls, payload: Any):
    try:
        return model_cls.model_validate({} if payload is None else payload)
    except PydanticValidationError:
        raise ValidationError(BODY_NOT_OBJECT)


async def prompt_envelope(payload: Any = Depends(read_json_body)) -> PromptOnly:
    return _validate(PromptOnly, payload)


async def message_list_envelope(payload: Any = Depends(read_json_body)) -> MessageList:
    return _validate(MessageList, payload)


async def full_passthrough_envelope(payload: Any = Depends(read_json_body)) -> Optional[FullPassthrough]:
    if payload is None:
        return None
    return _validate(FullPassthrough, payload)


def _generate(generator: ChatGenerator, messages: list[Message], options: ModelParams,
              kind: EnvelopeKind, failure_message: str) -> Dict[str, Any]:
    result = generator.generate(messages, options)
    if isinstance(result, GenerationFailure):
        raise UpstreamError(failure_message, result)
    return render_success(kind, result)

# ------------------------------------------------------------
# 💬 LLM routes
# ------------------------------------------------------------
@app.post(f"{LLM_PREFIX}/completion", dependencies=[Depends(require_api_key)])
def completion(
    envelope: PromptOnly = Depends(prompt_envelope),
    generator: ChatGenerator = Depends(get_generator),
):
    messages, options = normalize_prompt(envelope)
    return _generate(generator, messages, options, EnvelopeKind.COMPLETION, "Error generating completion")


@app.post(f"{LLM_PREFIX}/chat", dependencies=[Depends(require_api_key)])
def chat(
    envelope: MessageList = Depends(message_list_envelope),
    generator: ChatGenerator = Depends(get_generator),
):
    messages, options = normalize_messages(envelope)
    return _generate(generator, messages, options, EnvelopeKind.CHAT, "Error generating chat completion")


@app.post(f"{LLM_PREFIX}/simple-prompt", dependencies=[Depends(require_api_key)])
def simple_prompt(
    envelope: PromptOnly = Depends(prompt_envelope),
    generator: ChatGenerator = Depends(get_generator),
):
    # defaults only: model/temperature/maxTokens in the body are ignored
    messages, _ = normalize_prompt(envelope)
    return _generate(generator, messages, ModelParams(), EnvelopeKind.COMPLETION, "Error generating completion")


@app.post(f"{LLM_PREFIX}/full-prompt", dependencies=[Depends(require_api_key)])
def full_prompt(
    envelope: Optional[FullPassthrough] = Depends(full_passthrough_envelope),
    generator: ChatGenerator = Depends(get_generator),
):
    messages, options = normalize_full_passthrough(envelope)
    return _generate(
        generator, messages, options, EnvelopeKind.PASSTHROUGH, "Error generating completion with full prompt"
    )

# ------------------------------------------------------------
# 🧭 Info & health checks
# ------------------------------------------------------------
def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@app.get("/api")
def api_root():
    return {
        "message": "API is running!",
        "timestamp": _timestamp(),
        "endpoints": [
            {"path": "/api", "description": "This endpoint (Root API)"},
            {"path": "/api/hello", "description": "Hello world endpoint"},
            {"path": f"{LLM_PREFIX}/completion", "description": "Prompt completion (x-api-key)"},
            {"path": f"{LLM_PREFIX}/chat", "description": "Chat completion from a messages array (x-api-key)"},
            {"path": f"{LLM_PREFIX}/simple-prompt", "description": "Prompt completion with default settings (x-api-key)"},
            {"path": f"{LLM_PREFIX}/full-prompt", "description": "Full request passthrough with raw response (x-api-key)"},
        ],
    }


@app.get("/api/hello")
def hello_api():
    return {"message": "Hello World!", "timestamp": _timestamp()}


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
    return {"message": "LLM Gateway service running."}
