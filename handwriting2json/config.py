# handwriting2json/config.py
from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve repo root: repo/ (since this file is repo/handwriting2json/config.py)
REPO_ENV = Path(__file__).resolve().parents[1] / ".env"


class Settings(BaseSettings):
    """
    Central config for the batch recognizer. Uses Pydantic v2 + pydantic-settings.

    - Loads env from the repo root .env if present
    - Ignores unknown env vars
    - Case-insensitive env keys
    - Accepts the legacy app-setting names (ComputerVisionKey, UriBase)
    """

    model_config = SettingsConfigDict(
        env_file=str(REPO_ENV),
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # --- Service ---------------------------------------------------------------
    COMPUTER_VISION_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("COMPUTER_VISION_KEY", "ComputerVisionKey"),
    )
    URI_BASE: str = Field(
        default="https://northeurope.api.cognitive.microsoft.com/vision/v2.0/recognizeText",
        validation_alias=AliasChoices("URI_BASE", "UriBase"),
    )
    # APIv2 parameter; APIv1 used "handwriting=true"
    RECOGNITION_MODE: str = "Handwritten"

    # --- Batch / polling policy (external API contract, keep 4 / 10 x 1s) -----
    MAX_PARALLEL: int = 4
    POLL_ATTEMPTS: int = 10
    POLL_INTERVAL_SEC: float = 1.0

    # --- Console ---------------------------------------------------------------
    LOG_LEVEL: str = "INFO"

    @property
    def submit_url(self) -> str:
        return f"{self.URI_BASE}?mode={self.RECOGNITION_MODE}"


# Singleton-style instance used by the app/tests
settings = Settings()
