# centralized configuration loader
# runs load_dotenv() to read .env
# values are read once at import; a missing API key doesn't block startup

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
STATIC_DIR = Path(os.getenv("STATIC_DIR") or Path(__file__).resolve().parents[1] / "public")

# Provider
PROVIDER = os.getenv("PROVIDER", "gemini")
GOOGLE_GEMINI_API_KEY = os.getenv("GOOGLE_GEMINI_API_KEY") or None
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-pro")
GEMINI_API_BASE = os.getenv("GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta").rstrip("/")
PROVIDER_TIMEOUT = float(os.getenv("PROVIDER_TIMEOUT", "60"))

# Generation
TEMPERATURE = float(os.getenv("TEMPERATURE", "0.7"))
TOP_K = int(os.getenv("TOP_K", "40"))
TOP_P = float(os.getenv("TOP_P", "0.95"))
MAX_OUTPUT_TOKENS = int(os.getenv("MAX_OUTPUT_TOKENS", "1024"))
