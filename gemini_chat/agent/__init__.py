"""Agno agent logic for the Gemini backend.

Responsibilities:
    - Gemini model and agent construction from configuration
    - One agent session per chat view with in-memory history
    - Streamed and single-shot replies

Keeps the agno framework out of the chat core, which only sees the
SessionHandle protocol.
"""

from gemini_chat.agent.chat_agent import (
    AgentService,
    AgentSession,
    BackendError,
    get_agent_service,
)
from gemini_chat.agent.config import AgentConfig, get_agent_config

__all__ = [
    "AgentConfig",
    "AgentService",
    "AgentSession",
    "BackendError",
    "get_agent_config",
    "get_agent_service",
]
