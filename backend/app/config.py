"""
Configuration - env vars, constants, logging setup.
"""

import os
import logging
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

ROOT_DIR = Path(__file__).parent.parent
load_dotenv(ROOT_DIR / '.env')

# Logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("subjects_api")

# Request metrics persisted to db.api_metrics
API_METRICS_ENABLED = os.environ.get("API_METRICS_ENABLED", "true").lower() in ("1", "true", "yes")
METRICS_RETENTION_DAYS = int(os.environ.get("METRICS_RETENTION_DAYS", "365"))

if not API_METRICS_ENABLED:
    logger.info("API metrics disabled - requests will not be recorded")


def get_cors_origins():
    """Allowed CORS origins from CORS_ORIGINS (comma separated)."""
    cors_origins_env = os.environ.get("CORS_ORIGINS")
    if cors_origins_env:
        return [origin.strip() for origin in cors_origins_env.split(",")]
    return [
        "http://localhost:3000",
        "http://127.0.0.1:3000"
    ]


GIT_COMMIT_FILE = ROOT_DIR / ".git_commit"


def _read_commit_file(path: Path) -> Optional[str]:
    """Commit SHA written by the image build, if present."""
    try:
        return path.read_text().strip() or None
    except OSError:
        return None


def get_version_info(commit_file: Path = GIT_COMMIT_FILE):
    """Deployment info served at /api/version."""
    git_commit = os.environ.get("GIT_COMMIT_SHA") or _read_commit_file(commit_file)
    if not git_commit:
        logger.warning(f"No GIT_COMMIT_SHA and no commit file at {commit_file}")

    return {
        "git_commit": git_commit or "unknown",
        "build_time": os.environ.get("BUILD_TIME", "unknown"),
        "environment": os.environ.get("ENV") or os.environ.get("ENVIRONMENT", "development"),
    }
