from functools import lru_cache
from typing import Dict, List

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    mongodb_uri: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string",
        alias="MONGODB_URI",
    )
    mongodb_db_name: str = Field(
        default="case_opener",
        description="Name of the MongoDB database",
        alias="MONGODB_DB_NAME",
    )
    skin_collection: str = Field(
        default="skins",
        description="MongoDB collection storing skin documents",
        alias="MONGODB_SKIN_COLLECTION",
    )
    crate_collection: str = Field(
        default="crates",
        description="MongoDB collection storing crate documents",
        alias="MONGODB_CRATE_COLLECTION",
    )
    inventory_collection: str = Field(
        default="inventories",
        description="MongoDB collection storing opened items per user",
        alias="MONGODB_INVENTORY_COLLECTION",
    )
    allowed_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to access the API",
        alias="ALLOWED_ORIGINS",
    )
    default_rarity_table: Dict[str, float] = Field(
        default_factory=lambda: {
            "gold": 0.26,
            "red": 0.64,
            "pink": 3.2,
            "purple": 15.98,
            "blue": 79.92,
        },
        description="Official drop odds in percent, used when a request sends none",
        alias="DEFAULT_RARITY_TABLE",
    )
    default_crate_price: float = Field(
        default=2.49,
        description="Price charged for crates stored without one",
        alias="DEFAULT_CRATE_PRICE",
    )
    charge_key_fee: bool = Field(
        default=True,
        description="Add the key price on top of the crate price when recording cost",
        alias="CHARGE_KEY_FEE",
    )
    key_price: float = Field(
        default=75.0,
        description="Flat fee for the key needed to open a crate",
        alias="KEY_PRICE",
    )
    default_user_id: str = Field(
        default="TEST_USER",
        description="Inventory owner used when an opening request names no user",
        alias="DEFAULT_USER_ID",
    )
    reel_length: int = Field(
        default=56,
        ge=1,
        description="Number of slots in the spin reel",
        alias="REEL_LENGTH",
    )
    reel_winner_index: int = Field(
        default=50,
        ge=0,
        description="Reel slot holding the awarded skin",
        alias="REEL_WINNER_INDEX",
    )
    reel_thresholds: List[float] = Field(
        default_factory=lambda: [0.85, 0.95, 0.99],
        description="Cumulative cut points for common/uncommon/rare reel fillers",
        alias="REEL_THRESHOLDS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="CASE_",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def check_reel_layout(self) -> "Settings":
        """Reject reel settings that would fail every crate opening."""

        if self.reel_winner_index >= self.reel_length:
            raise ValueError(
                f"REEL_WINNER_INDEX ({self.reel_winner_index}) must be below "
                f"REEL_LENGTH ({self.reel_length})"
            )
        thresholds = self.reel_thresholds
        if len(thresholds) != 3:
            raise ValueError(f"REEL_THRESHOLDS needs 3 cut points, got {len(thresholds)}")
        if not 0 < thresholds[0] < thresholds[1] < thresholds[2] < 1:
            raise ValueError(
                f"REEL_THRESHOLDS must increase strictly within (0, 1), got {thresholds}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()


settings = get_settings()
