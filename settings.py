# settings.py
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv(override=True)


class Settings(BaseModel):
    # completion service
    API_KEY: str = os.getenv("GOOGLE_GENAI_API_KEY", "")
    MODEL_NAME: str = os.getenv("MODEL_NAME", "gemini-2.5-flash")
    MAX_OUTPUT_TOKENS: int = int(os.getenv("MAX_OUTPUT_TOKENS", "300"))
    TEMPERATURE: float = float(os.getenv("TEMPERATURE", "0.7"))

    # conversation logging (optional)
    AIRTABLE_API_KEY: str = os.getenv("AIRTABLE_API_KEY", "")
    AIRTABLE_BASE_ID: str = os.getenv("AIRTABLE_BASE_ID", "")
    AIRTABLE_TABLE_NAME: str = os.getenv("AIRTABLE_TABLE_NAME", "Chat Conversations")
    AIRTABLE_API_URL: str = os.getenv("AIRTABLE_API_URL", "https://api.airtable.com/v0")
    AIRTABLE_TIMEOUT: float = float(os.getenv("AIRTABLE_TIMEOUT", "10"))

    # page analytics (optional)
    GA_MEASUREMENT_ID: Optional[str] = os.getenv("GA_MEASUREMENT_ID") or None

    CORS_ALLOW_ORIGINS: List[str] = os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")

    @property
    def logging_enabled(self) -> bool:
        return bool(self.AIRTABLE_API_KEY and self.AIRTABLE_BASE_ID)


def get_settings() -> Settings:
    return Settings()
