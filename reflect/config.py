from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the Reflect backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("REFLECT_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("REFLECT_DB_PATH") or (self.data_root / "reflect.db")
        ).expanduser()

        # ---- Wellness timer driver ----
        self.exercise_tick_ms: int = int(os.environ.get("REFLECT_EXERCISE_TICK_MS") or "50")
        self.meditation_tick_ms: int = int(os.environ.get("REFLECT_MEDITATION_TICK_MS") or "100")

        self.seed_resources: bool = (os.environ.get("REFLECT_SEED_RESOURCES") or "1").strip() in {"1", "true", "True"}
        self.conversation_limit: int = int(os.environ.get("REFLECT_CONVERSATION_LIMIT") or "10")
        self.log_level: str = (os.environ.get("REFLECT_LOG_LEVEL") or "INFO").upper()

        cors = os.environ.get("REFLECT_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
