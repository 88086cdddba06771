import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

BACKEND_DIR = Path(__file__).resolve().parent


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Reference data (question bank + profession catalog)
    data_dir: Path = BACKEND_DIR / "services" / "data"
    questions_file: str = "questions.json"
    professions_file: str = "professions.json"

    # Share of the final match score taken by RIASEC fit; skills get the rest
    riasec_weight: float = Field(default=0.7, ge=0.0, le=1.0)
    require_complete_answers: bool = False

    match_rate_limit: str = "30/minute"
    rate_limit_enabled: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
