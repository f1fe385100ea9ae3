# main.py
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import BackgroundTasks, Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from completion import generate_reply
from conversation_log import log_conversation
from models import ChatRequest, ChatResponse, ClientConfig, ConversationLogRecord, ErrorResponse
from prompt import build_instructions
from settings import Settings, get_settings

logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("portfolio")

STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(title="Portfolio Assistant", version="1.0.0")

# --- CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


def log_event(name: str, **properties: Any) -> None:
    logger.info("[CHAT API] %s: %s", name, properties)


# --- Error bodies are always {"error": "..."} ---
@app.exception_handler(HTTPException)
async def http_error(request: Request, exc: HTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    log_event("chat_api_error", error="Invalid request body")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.get("/", include_in_schema=False)
def index():
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/healthz")
def healthz():
    return {"ok": True}


@app.get("/api/client-config", response_model=ClientConfig)
def client_config(settings: Settings = Depends(get_settings)):
    return ClientConfig(ga_measurement_id=settings.GA_MEASUREMENT_ID)


@app.post(
    "/api/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def chat(
    req: ChatRequest,
    request: Request,
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(get_settings),
):
    start = time.monotonic()

    if not req.message or not req.message.strip():
        log_event("chat_api_error", error="Message is required")
        raise HTTPException(status_code=400, detail="Message is required")

    previous = req.previous_messages or []
    request_info: Dict[str, Any] = {
        "messageLength": len(req.message),
        "conversationLength": len(previous),
    }
    user_agent: Optional[str] = request.headers.get("user-agent")
    if user_agent:
        request_info["userAgent"] = user_agent
    ip = request.headers.get("x-forwarded-for") or request.headers.get("x-real-ip")
    if ip:
        request_info["ip"] = ip
    log_event("chat_api_request", **request_info)

    if not settings.API_KEY:
        raise HTTPException(status_code=500, detail="Completion API key not configured")

    instructions = build_instructions(req.message, previous)

    try:
        result = generate_reply(instructions, settings)
    except Exception as e:
        logger.exception("Completion request failed")
        log_event(
            "chat_api_error",
            error=str(e),
            processingTime=int((time.monotonic() - start) * 1000),
        )
        raise HTTPException(status_code=500, detail="Failed to generate response")

    elapsed_ms = int((time.monotonic() - start) * 1000)
    success_info: Dict[str, Any] = {
        "responseLength": len(result.text),
        "processingTime": elapsed_ms,
    }
    if result.tokens_used is not None:
        success_info["tokensUsed"] = result.tokens_used
    log_event("chat_api_success", **success_info)

    # runs after the response is sent
    background_tasks.add_task(
        log_conversation,
        ConversationLogRecord(
            user_message=req.message,
            ai_response=result.text,
            message_length=len(req.message),
            response_time_ms=elapsed_ms,
            tokens_used=result.tokens_used,
        ),
        settings,
    )

    return ChatResponse(message=result.text)
