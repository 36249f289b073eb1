"""Agent configuration with environment variable loading.

Pydantic-based configuration for the Gemini chat backend.
Values are read once when the config is built and never mutated afterwards.
"""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class AgentConfig(BaseModel):
    """Configuration for the Gemini chat agent.

    A missing API key is accepted here on purpose: the backend rejects the
    request and the chat shows its usual failure notice.

    Attributes:
        api_key: Google AI API key (may be empty).
        model_name: Gemini model identifier.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_tokens: Maximum tokens in a generated response (None for model default).
        streaming: Stream responses chunk by chunk instead of single-shot replies.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GOOGLE_API_KEY", os.getenv("GEMINI_API_KEY", "")),
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        description="Model to use",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int | None = Field(
        default=None,
        ge=1,
        le=65536,
        description="Maximum tokens in generated response",
    )
    streaming: bool = Field(
        default_factory=lambda: _env_flag("CHAT_STREAMING", True),
        description="Stream responses incrementally",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace; warn when no key is configured."""
        v = (v or "").strip()
        if not v:
            logger.warning("No API key set (GOOGLE_API_KEY); requests will fail")
        return v

    @field_validator("model_name")
    @classmethod
    def validate_model_name(cls, v: str) -> str:
        """Fall back to the default model when the name is blank."""
        return v.strip() or DEFAULT_MODEL


def get_agent_config() -> AgentConfig:
    """Create agent configuration from environment.

    Returns:
        Configured AgentConfig instance.
    """
    return AgentConfig()
