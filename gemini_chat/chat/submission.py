"""Entry point for user-authored turns."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from gemini_chat.chat.ingestion import StreamingIngestionController
from gemini_chat.chat.scroll import ScrollFollowController
from gemini_chat.models.schemas import Message, Role

if TYPE_CHECKING:
    from gemini_chat.chat.session import ChatSession

logger = logging.getLogger(__name__)


class InputSubmissionHandler:
    """Validates input and dispatches it to the ingestion controller.

    This is the only way new turns enter the transcript, which is what keeps
    at most one request in flight per session.
    """

    def __init__(
        self,
        session: "ChatSession",
        ingestion: StreamingIngestionController,
        scroll: ScrollFollowController | None = None,
        clear_input: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the handler.

        Args:
            session: Session holding the transcript and loading flag.
            ingestion: Controller that runs the backend request.
            scroll: Scroll-follow controller reset on every accepted submission.
            clear_input: Clears the input surface once text is accepted.
        """
        self._session = session
        self._ingestion = ingestion
        self._scroll = scroll
        self._clear_input = clear_input

    def can_submit(self, text: str | None) -> bool:
        """Check whether ``text`` would be accepted right now."""
        if not text or not text.strip():
            return False
        return not self._session.is_loading

    async def submit(self, text: str | None) -> bool:
        """Submit user text.

        Empty or whitespace-only text, or text sent while a request is in
        flight, is silently rejected without touching any state.

        Args:
            text: Raw text from the input surface.

        Returns:
            True if the text was accepted (after its response finished),
            False if it was rejected.
        """
        if not self.can_submit(text):
            logger.debug("Submission rejected (empty input or request in flight)")
            return False

        # Claim the gate before any listener runs
        self._session.is_loading = True
        try:
            if self._scroll is not None:
                self._scroll.reset()
            self._session.transcript.append(Message(role=Role.USER, text=text))
            if self._clear_input is not None:
                self._clear_input()

            await self._ingestion.run(text)
        finally:
            self._session.is_loading = False
        return True
