"""
Runtime configuration for the Easy Video backend
"""
import os
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

# Gemini credentials. No key means mock mode: every remote call fails fast
# and the callers fall back to their placeholder results.
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")

# Model names
GEMINI_TEXT_MODEL = os.getenv("GEMINI_TEXT_MODEL", "gemini-2.0-flash-exp")
GEMINI_IMAGE_MODEL = os.getenv("GEMINI_IMAGE_MODEL", "imagen-4.0-generate-001")
GEMINI_VIDEO_MODEL = os.getenv("GEMINI_VIDEO_MODEL", "veo-3.0-generate-001")

GENERATION_TIMEOUT = int(os.getenv("GENERATION_TIMEOUT", "180"))  # seconds, per remote call

# Video operations are polled until done. 0 attempts = no ceiling.
VIDEO_POLL_INTERVAL = float(os.getenv("VIDEO_POLL_INTERVAL", "10"))
VIDEO_POLL_MAX_ATTEMPTS = int(os.getenv("VIDEO_POLL_MAX_ATTEMPTS", "0"))

# Public base URL used to build absolute links to persisted videos
APP_URL = os.getenv("APP_URL", "http://localhost:8000").rstrip("/")
PUBLIC_VIDEO_DIR = os.getenv("PUBLIC_VIDEO_DIR", os.path.join("public", "videos"))
VIDEO_URL_PATH = "/videos"

LOG_FILE = os.getenv("LOG_FILE", "easyvideo.log")
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

# Simulated latency of the canned chat endpoint
CHAT_MIN_DELAY = float(os.getenv("CHAT_MIN_DELAY", "0.5"))
CHAT_MAX_DELAY = float(os.getenv("CHAT_MAX_DELAY", "1.0"))

# Fallback media
PLACEHOLDER_IMAGE_IDS = [1015, 1018, 1019, 1020, 1025, 1035, 1040, 1043, 1050, 1055]
PLACEHOLDER_IMAGE_URL = "https://picsum.photos/1024/768?random={image_id}&t={timestamp}"
# Fallback clips: absolute URLs are used as-is, bare filenames are served
# from PUBLIC_VIDEO_DIR.
SAMPLE_VIDEO_URLS = [
    url.strip() for url in os.getenv(
        "SAMPLE_VIDEO_URLS",
        "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/ForBiggerBlazes.mp4,"
        "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/ForBiggerEscapes.mp4,"
        "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/ForBiggerJoyrides.mp4"
    ).split(",") if url.strip()
]

WELCOME_MESSAGE = (
    "Welcome to Easy Video! I can help you create images and videos using natural language. "
    "Try saying something like \"Create an image of a sunset over mountains\" or "
    "\"Generate a video of a cat playing with a ball\"."
)
