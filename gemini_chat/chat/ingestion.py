"""Streaming ingestion of one backend response into the transcript.

State machine per request:

    IDLE -> AWAITING -> STREAMING -> COMPLETED | FAILED -> IDLE

A placeholder model turn is appended before the request is opened, and each
arriving chunk rewrites that placeholder with the accumulated text. Any
failure, whether opening the request or mid-stream, replaces the placeholder
with a fixed notice and discards partial text.

Requests cannot be cancelled and have no timeout: once opened they run to
completion or failure. Only one request runs per session at a time; the
submission handler's loading gate enforces that, not this controller.
"""

import logging
from typing import TYPE_CHECKING

from gemini_chat.models.schemas import IngestionState, Message, Role

if TYPE_CHECKING:
    from gemini_chat.chat.session import ChatSession

logger = logging.getLogger(__name__)

ERROR_NOTICE = "Sorry, something went wrong."


class StreamingIngestionController:
    """Owns the lifecycle of the session's outstanding request."""

    def __init__(self, session: "ChatSession", streaming: bool = True) -> None:
        """Initialize the controller.

        Args:
            session: The session whose transcript and loading flag are driven.
            streaming: Consume a chunk stream (True) or await one complete
                response and apply it as a single chunk (False).
        """
        self._session = session
        self._streaming = streaming
        self.state = IngestionState.IDLE
        self.last_outcome: IngestionState | None = None

    @property
    def streaming(self) -> bool:
        return self._streaming

    async def run(self, text: str) -> IngestionState:
        """Send ``text`` to the backend and ingest the response.

        Args:
            text: The user's message.

        Returns:
            IngestionState.COMPLETED or IngestionState.FAILED.
        """
        session = self._session
        transcript = session.transcript

        session.is_loading = True
        self.state = IngestionState.AWAITING
        transcript.append(Message(role=Role.MODEL, text=""))

        chunk_count = 0
        try:
            if self._streaming:
                stream = await session.connection.send_message_stream(text)
                self.state = IngestionState.STREAMING
                async for chunk in stream:
                    self._apply_chunk(chunk.text)
                    chunk_count += 1
            else:
                response = await session.connection.send_message(text)
                self.state = IngestionState.STREAMING
                self._apply_chunk(response.text)
                chunk_count = 1
        except Exception:
            logger.exception(f"Request failed after {chunk_count} chunk(s)")
            transcript.update_last(ERROR_NOTICE)
            outcome = IngestionState.FAILED
        else:
            logger.info(f"Response completed ({chunk_count} chunk(s))")
            outcome = IngestionState.COMPLETED
        finally:
            session.is_loading = False
            self.state = IngestionState.IDLE

        self.last_outcome = outcome
        return outcome

    def _apply_chunk(self, chunk_text: str) -> None:
        transcript = self._session.transcript
        current = transcript.last.text if transcript.last is not None else ""
        transcript.update_last(current + chunk_text)
