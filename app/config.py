import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    openai_api_key: Optional[str] = None
    model_id: str = "gpt-4o-mini"
    temperature: float = 0.3
    response_language: str = "Spanish"
    # where the browser view's client reaches /api/compare
    api_base_url: str = "http://127.0.0.1:8000"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            openai_api_key=os.environ.get("OPENAI_API_KEY") or None,
            model_id=os.environ.get("MODEL_ID", cls.model_id),
            temperature=float(os.environ.get("COMPARE_TEMPERATURE", cls.temperature)),
            response_language=os.environ.get("RESPONSE_LANGUAGE", cls.response_language),
            api_base_url=os.environ.get("COMPARE_API_URL", cls.api_base_url).rstrip("/"),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).upper(),
        )


settings = Settings.from_env()
