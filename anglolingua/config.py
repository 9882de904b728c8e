import os
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load .env from project root (one level up from anglolingua/)
_env_path = Path(__file__).resolve().parent.parent / ".env"
# In pytest, keep config deterministic from env vars set by tests.
if "pytest" not in sys.modules:
    load_dotenv(_env_path)

# Mock Mode Toggle
# When True, the AI tutor returns scripted replies without API calls
# When False, the OpenAI chat API is used (requires OPENAI_API_KEY)
MOCK_MODE = os.getenv("MOCK_MODE", "true").lower() in ("true", "1", "yes")

# OpenAI - AI conversation tutor
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_ORG_ID = os.getenv("OPENAI_ORG_ID", "")
CHAT_MODEL = os.getenv("CHAT_MODEL", "gpt-4o-mini")
AI_TIMEOUT_SECONDS = float(os.getenv("AI_TIMEOUT_SECONDS", "20"))

# Access tiers and homework scoring
FREE_LESSON_COUNT = int(os.getenv("FREE_LESSON_COUNT", "2"))
PASS_THRESHOLD = float(os.getenv("PASS_THRESHOLD", "60"))

# Local persistence (user session record + theme preference)
STORAGE_PATH = os.getenv(
    "STORAGE_PATH", str(Path.home() / ".anglolingua" / "storage.json")
)

# Simulated catalog latency (seconds)
CATALOG_LATENCY_SECONDS = float(os.getenv("CATALOG_LATENCY_SECONDS", "0.5"))
LESSON_LATENCY_SECONDS = float(os.getenv("LESSON_LATENCY_SECONDS", "0.3"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
