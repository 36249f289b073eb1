"""Pydantic models shared by the chat core, the backend and the UI.

Models:
    - Role: Speaker of a turn (user or model)
    - Message: One conversation turn
    - TranscriptChange: Mutation notice for transcript listeners
    - ScrollMetrics: Viewport measurements from a scroll event
    - Chunk / ChatResponse: Backend response payloads
    - IngestionState: Request lifecycle states
"""

from gemini_chat.models.schemas import (
    ChangeKind,
    ChatResponse,
    Chunk,
    IngestionState,
    Message,
    Role,
    ScrollMetrics,
    TranscriptChange,
)

__all__ = [
    "ChangeKind",
    "ChatResponse",
    "Chunk",
    "IngestionState",
    "Message",
    "Role",
    "ScrollMetrics",
    "TranscriptChange",
]
