# robust .env loading
import os
from pathlib import Path
from dotenv import load_dotenv

# 1) load from CWD (project root when you run commands there)
load_dotenv(override=False)
# 2) also try repo root even if code runs from src/
repo_root = Path(__file__).resolve().parents[2]
env_path = repo_root / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path, override=False)

# --- Flask / server ---
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
FLASK_ENV = os.getenv("FLASK_ENV", "production")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT") or 5000)

# --- Client ---
EVENTS_API_BASE = os.getenv("EVENTS_API_BASE", f"http://localhost:{PORT}")
# unset means no timeout: a hung server leaves the fetch pending
EVENTS_TIMEOUT = float(os.environ["EVENTS_TIMEOUT"]) if os.getenv("EVENTS_TIMEOUT") else None

# --- Seed events (loaded once into the store at startup) ---
EVENTS = [
    {"id": 1, "name": "Spring Festival", "date": "2025-06-01"},
    {"id": 2, "name": "Tech Conference", "date": "2025-06-10"},
    {"id": 3, "name": "Music Gig", "date": "2025-07-05"},
]
