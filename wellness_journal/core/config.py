import os
from dotenv import load_dotenv

load_dotenv()  # Load from .env file

# Runtime
APP_ENV = os.getenv("APP_ENV") or os.getenv("NODE_ENV", "development")
IS_PRODUCTION = APP_ENV == "production"
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Storage
DATA_FILE = os.getenv("DATA_FILE", "data.json")

# Analytics day/week boundaries; host local time when unset
TIMEZONE = os.getenv("TIMEZONE")

# Gemini through its OpenAI compatibility layer
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/")
LLM_CHAT_MODEL = os.getenv("LLM_CHAT_MODEL", "gemini-1.5-flash")
LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", "30"))
LLM_MAX_RETRIES = int(os.getenv("LLM_MAX_RETRIES", "2"))
