"""Structural interfaces for the backend collaborator.

The chat core only depends on these protocols, so any backend that can open
a session and answer messages can be plugged in (the agno service in
production, scripted fakes in tests).
"""

from collections.abc import AsyncIterator, Sequence
from typing import Protocol, runtime_checkable

from gemini_chat.models.schemas import ChatResponse, Chunk, Message


@runtime_checkable
class SessionHandle(Protocol):
    """An open conversation with the backend."""

    async def send_message(self, text: str) -> ChatResponse:
        """Send a message and wait for the complete response."""
        ...

    async def send_message_stream(self, text: str) -> AsyncIterator[Chunk]:
        """Open a streamed request.

        Awaiting opens the request; iterating the result yields chunks in the
        order the backend produces them. The sequence is finite, cannot be
        restarted, and may raise part way through.
        """
        ...


@runtime_checkable
class ChatBackend(Protocol):
    """Factory for backend sessions."""

    def create_session(self, model: str, history: Sequence[Message] = ()) -> SessionHandle:
        """Open a session for ``model`` seeded with prior turns."""
        ...
