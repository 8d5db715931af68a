"""Runtime settings, read from ``IMS_*`` environment variables or ``.env``."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="IMS_",
        env_file=".env",
        extra="ignore",
    )

    data_dir: Path = _DEFAULT_DATA_DIR
    seed_demo_data: bool = True

    remote_enabled: bool = False
    api_base_url: str = "http://localhost:5000"
    request_timeout: float = 5.0

    poll_interval: float = 1.0
    change_probability: float = 0.05

    log_level: str = "WARNING"

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"


def load_settings() -> Settings:
    return Settings()
