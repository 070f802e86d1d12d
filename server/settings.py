"""Runtime settings read from the environment (and a local .env file)."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()  # load environment variables from .env file

DEFAULT_DB_PATH = Path(__file__).parent / "data" / "nodeflow.db"
DB_PATH = Path(os.getenv("NODEFLOW_DB_PATH", str(DEFAULT_DB_PATH)))

# CORS origins - comma-separated values, or "*" for all (development only)
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

# base URL used when building embed links for a project
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:8000")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR")  # file logging is off unless set
