from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Development
    DEV_MODE: bool = Field(default=True, description="Enable debug mode")

    # Parking Configuration
    MAX_VEHICLES: int = Field(default=20, gt=0, description="Maximum number of parked vehicles")
    INITIAL_PERIOD_MINUTES: int = Field(default=120, ge=0, description="Minutes covered by the base fee")
    ADDITIONAL_BLOCK_MINUTES: int = Field(default=15, gt=0, description="Length of each additional time block")
    ADDITIONAL_BLOCK_FEE: int = Field(default=5, ge=0, description="Fee charged per additional time block")
    DISCOUNT_PERCENTAGE: int = Field(default=15, ge=0, le=100, description="Discount applied with a discount card")


# Create settings instance
settings = Settings()
