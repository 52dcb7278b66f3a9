"""
Configuration settings for the hedge engine

Loads environment variables and provides default hedge parameters.
"""
import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings"""

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE") or None

    # Slippage (basis points, 10000 = 100%)
    DEFAULT_SLIPPAGE_BPS: int = int(os.getenv("DEFAULT_SLIPPAGE_BPS", 50))
    MAX_SLIPPAGE_BPS: int = int(os.getenv("MAX_SLIPPAGE_BPS", 10000))

    # Identifier of the party computing hedges (mixed into request ids)
    HEDGER_ID: str = os.getenv("HEDGER_ID", "").lower()

    def validate(self) -> None:
        """Reject slippage settings outside [0, 10000]"""
        if not 0 <= self.MAX_SLIPPAGE_BPS <= 10000:
            raise ValueError(f"MAX_SLIPPAGE_BPS must be within 0..10000, got {self.MAX_SLIPPAGE_BPS}")
        if not 0 <= self.DEFAULT_SLIPPAGE_BPS <= self.MAX_SLIPPAGE_BPS:
            raise ValueError(
                f"DEFAULT_SLIPPAGE_BPS must be within 0..{self.MAX_SLIPPAGE_BPS}, "
                f"got {self.DEFAULT_SLIPPAGE_BPS}"
            )


# Create global settings instance
settings = Settings()

# Validate critical settings on import
settings.validate()
