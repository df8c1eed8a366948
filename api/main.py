import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes.chat import router as chat_router
from api.routes.upload import router as upload_router
from api.routes.hr import router as hr_router
from api.routes.recordings import router as recordings_router
from api.routes.email import router as email_router
from config.settings import settings
from utils.database import init_db
from utils.exceptions import GatewayError

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

DESCRIPTION = """
HTTP gateway for the AI interview workflow.

## Quick Start

1. **Extract CV / JD text** → `POST /api/upload` (multipart `cv`, `jd`)
2. **Start the interview** → `POST /api/chat` with `messages: []`, `cv`, `jd` and a `sessionId`
3. **Continue** → `POST /api/chat` with the full transcript and `userText`
4. **Archive** → `POST /api/chat/save` with the finished transcript

The caller owns the transcript and sends it in full on every turn.

## Errors

Every error is returned as `{"error": "<message>"}`.
"""

tags_metadata = [
    {
        "name": "Health",
        "description": "Liveness endpoint.",
    },
    {
        "name": "Chat",
        "description": "Interview turns, scorecard rendering and transcript archival.",
    },
    {
        "name": "Upload",
        "description": "CV / JD text extraction.",
    },
    {
        "name": "HR",
        "description": "JD/CV records keyed by interview UID.",
    },
    {
        "name": "Recordings",
        "description": "Interview recording uploads to blob storage.",
    },
    {
        "name": "Email",
        "description": "Interview invite emails.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    init_db()
    logger.info(f"Gateway listening on http://{settings.API_HOST}:{settings.API_PORT}")
    yield


app = FastAPI(
    title="HR Interview Gateway",
    description=DESCRIPTION,
    version="1.0.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Configure CORS
ALLOWED_ORIGINS = settings.ALLOWED_ORIGINS.split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============ ERROR HANDLERS ============

@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(status_code=exc.status_code, content={"error": message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else err.get("msg", ""))
    message = "Invalid request: " + "; ".join(problems) if problems else "Invalid request"
    logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ============ ROOT & HEALTH ============

@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information and documentation links"""
    return {
        "message": "HR Interview Gateway",
        "version": "1.0.0",
        "documentation": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "endpoints": {
            "health": "/healthz",
            "chat": "/api/chat",
            "scorecard": "/api/chat/scorecard",
            "save": "/api/chat/save",
            "upload": "/api/upload",
            "hr": "/api/hr",
            "recordings": "/api/recordings/upload",
            "email": "/api/email/send-interview-invite"
        }
    }


@app.get("/healthz", tags=["Health"])
def healthz():
    """Liveness only."""
    return Response(status_code=200)


# Register routers
app.include_router(chat_router)
app.include_router(upload_router)
app.include_router(hr_router)
app.include_router(recordings_router)
app.include_router(email_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
