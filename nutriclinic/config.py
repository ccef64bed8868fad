from __future__ import annotations

import os
from pathlib import Path
from typing import List


def _env_flag(name: str, default: str) -> bool:
    return (os.environ.get(name) or default).strip() in {"1", "true", "True", "yes"}


class Settings:
    """Centralized configuration for the nutrition clinic backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        data_root_default = base_dir.parent / "data"

        self.data_root: Path = Path(
            os.environ.get("NUTRICLINIC_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("NUTRICLINIC_DB_PATH") or (self.data_root / "nutriclinic.db")
        ).expanduser()
        self.log_level: str = (os.environ.get("NUTRICLINIC_LOG_LEVEL") or "INFO").upper()

        # ---- FatSecret platform ----
        # Consumer credentials must come from the environment; there is no usable default.
        self.fatsecret_consumer_key: str = os.environ.get("FATSECRET_CONSUMER_KEY") or ""
        self.fatsecret_consumer_secret: str = os.environ.get("FATSECRET_CONSUMER_SECRET") or ""
        self.fatsecret_base_url: str = os.environ.get(
            "FATSECRET_BASE_URL", "https://platform.fatsecret.com/rest/server.api"
        )
        self.fatsecret_profile_url: str = os.environ.get(
            "FATSECRET_PROFILE_URL", "https://platform.fatsecret.com/rest/profile/v1"
        )
        self.fatsecret_timeout: float = float(os.environ.get("FATSECRET_TIMEOUT") or "30")
        # profile.create hands back a token/secret pair; when enabled the app switches to it.
        self.fatsecret_adopt_profile_credentials: bool = _env_flag(
            "FATSECRET_ADOPT_PROFILE_CREDENTIALS", "1"
        )
        self.recipe_page_size: int = int(os.environ.get("FATSECRET_RECIPE_PAGE_SIZE") or "10")

        cors = os.environ.get("NUTRICLINIC_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
