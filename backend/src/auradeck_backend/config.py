from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from auradeck_backend.engine.models import AllocationScheme, LayoutMetadata


class Settings(BaseSettings):
    """Application settings loaded from environment (AURADECK_*)."""

    model_config = SettingsConfigDict(env_prefix="AURADECK_", env_file=".env", extra="ignore")

    app_name: str = "AuraDeck Backend"
    log_level: str = "INFO"

    allocation_scheme: AllocationScheme = AllocationScheme.LINEAR

    # Image paths are declared here; the renderer creates the files.
    asset_root: str = "assets/decks"

    storage_backend: str = "memory"
    storage_dir: Path = Path("data/decks")

    # Print layout constants, passed through to the layout service untouched
    sheet_size: str = "13x19in"
    card_size: str = "2.75x4.75in"
    cards_per_sheet: int = 12
    bleed_in: float = 0.125
    margin_in: float = 0.25

    def layout(self) -> LayoutMetadata:
        return LayoutMetadata(
            sheet_size=self.sheet_size,
            card_size=self.card_size,
            cards_per_sheet=self.cards_per_sheet,
            bleed_in=self.bleed_in,
            margin_in=self.margin_in,
        )


settings = Settings()
