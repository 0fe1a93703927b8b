import os
import logging
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import (
    GEMINI_TEXT_MODEL,
    GEMINI_IMAGE_MODEL,
    GEMINI_VIDEO_MODEL,
    VIDEO_POLL_INTERVAL,
    VIDEO_POLL_MAX_ATTEMPTS,
    PUBLIC_VIDEO_DIR,
    VIDEO_URL_PATH,
    LOG_FILE,
    CORS_ORIGINS,
)
from routes.generation import router as generation_router
from routes.chat import router as chat_router
from routes.sessions import router as sessions_router
from services.gemini_service import get_gemini_service
from services.session_service import get_session_store


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler(LOG_FILE)
    ]
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Easy Video Backend",
    description="Chat-driven image and video generation: intent -> enhanced prompt -> Gemini media",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(generation_router)
app.include_router(chat_router)
app.include_router(sessions_router)

# Persisted videos are served straight from disk
os.makedirs(PUBLIC_VIDEO_DIR, exist_ok=True)
app.mount(VIDEO_URL_PATH, StaticFiles(directory=PUBLIC_VIDEO_DIR), name="videos")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render errors as {"error": ...} for the frontend."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"}
    )


@app.on_event("startup")
async def startup_event():
    """Initialize services on startup."""
    gemini = get_gemini_service()
    logger.info("✅ Easy Video Backend started successfully")
    logger.info(f"✅ Text model: {GEMINI_TEXT_MODEL}")
    logger.info(f"✅ Image model: {GEMINI_IMAGE_MODEL}")
    logger.info(f"✅ Video model: {GEMINI_VIDEO_MODEL}")
    if gemini.is_mock:
        logger.warning("⚠️ No Gemini API key configured, serving placeholder media")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    logger.debug("Health check requested")
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "mock_mode": get_gemini_service().is_mock,
        "active_sessions": len(get_session_store()),
        "models": {
            "text": GEMINI_TEXT_MODEL,
            "image": GEMINI_IMAGE_MODEL,
            "video": GEMINI_VIDEO_MODEL
        }
    }


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": "Easy Video Backend API",
        "version": app.version,
        "endpoints": {
            "analyze_intent": "/api/analyze-intent",
            "generate_image": "/api/generate-image",
            "generate_video": "/api/generate-video",
            "chat": "/api/chat",
            "sessions": "/api/sessions",
            "videos": f"{VIDEO_URL_PATH}/<filename>",
            "health": "/health"
        },
        "video_polling": {
            "interval_seconds": VIDEO_POLL_INTERVAL,
            "max_attempts": VIDEO_POLL_MAX_ATTEMPTS or None
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
