"""
Purpose:
- Centralized configuration using pydantic-settings.
- Reads from environment variables and optional .env file.
- Built once at startup by the app factory and handed to request handlers;
  nothing reads the environment at request time.
"""

from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SAFETY_CATEGORIES: List[str] = [
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
]

class Settings(BaseSettings):
    # Pydantic v2 config (env file + ignore unexpected env vars)
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required: GOOGLE_API_KEY
    google_api_key: str = Field(..., min_length=1, description="API key for the Gemini API")

    # API host/port
    host: str = Field(default="0.0.0.0", description="Bind address for FastAPI/Uvicorn")
    port: int = Field(default=3000, description="Port for FastAPI/Uvicorn")

    # CORS
    cors_allow_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed origins for browser apps"
    )

    log_level: str = Field(default="INFO")

    # ---- Gemini model config ----
    gemini_model: str = Field(default="gemini-1.5-pro", description="Multimodal model name")
    gemini_base_url: str = Field(default="https://generativelanguage.googleapis.com")
    gemini_api_version: str = Field(default="v1beta")
    gemini_temperature: float = Field(default=0.9)
    gemini_top_k: int = Field(default=32)
    gemini_top_p: float = Field(default=0.95)
    gemini_max_output_tokens: int = Field(default=1024)
    gemini_safety_threshold: str = Field(default="BLOCK_MEDIUM_AND_ABOVE")
