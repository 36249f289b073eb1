"""Per-view chat session state."""

import logging
from collections.abc import Callable

from gemini_chat.chat.ingestion import StreamingIngestionController
from gemini_chat.chat.protocols import ChatBackend, SessionHandle
from gemini_chat.chat.scroll import ScrollFollowController
from gemini_chat.chat.submission import InputSubmissionHandler
from gemini_chat.chat.transcript import Transcript, TranscriptListener

logger = logging.getLogger(__name__)


class ChatSession:
    """Memory-only state bundle for one chat view.

    Holds the transcript, the loading flag and the backend connection, and
    wires the submission handler, ingestion controller and scroll-follow
    controller together. The session lives as long as the view; nothing is
    persisted and there is no teardown.

    Attributes:
        transcript: Ordered conversation turns.
        is_loading: True while a request is in flight.
        connection: Backend session handle reused for every turn.
        ingestion: Controller running the outstanding request.
        submission: Handler that accepts user input.
    """

    def __init__(
        self,
        connection: SessionHandle,
        streaming: bool = True,
        scroll: ScrollFollowController | None = None,
        clear_input: Callable[[], None] | None = None,
        renderer: TranscriptListener | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            connection: Open backend session.
            streaming: Use streamed (True) or single-shot (False) replies.
            scroll: Scroll-follow controller notified of transcript changes.
            clear_input: Clears the input surface after an accepted submission.
            renderer: Transcript listener that draws changes; runs before
                scroll-follow so the view scrolls over fresh content.
        """
        self.transcript = Transcript()
        self.is_loading = False
        self.connection = connection
        self.scroll = scroll
        self.ingestion = StreamingIngestionController(self, streaming=streaming)
        self.submission = InputSubmissionHandler(
            self, self.ingestion, scroll=scroll, clear_input=clear_input
        )
        if renderer is not None:
            self.transcript.subscribe(renderer)
        if scroll is not None:
            self.transcript.subscribe(scroll.handle_transcript_change)

    @classmethod
    def open(
        cls,
        backend: ChatBackend,
        model: str,
        streaming: bool = True,
        scroll: ScrollFollowController | None = None,
        clear_input: Callable[[], None] | None = None,
        renderer: TranscriptListener | None = None,
    ) -> "ChatSession":
        """Create a session with a fresh backend connection and empty history."""
        connection = backend.create_session(model, [])
        logger.info(f"Opened chat session (model={model}, streaming={streaming})")
        return cls(
            connection,
            streaming=streaming,
            scroll=scroll,
            clear_input=clear_input,
            renderer=renderer,
        )

    async def submit(self, text: str | None) -> bool:
        """Submit user text; see InputSubmissionHandler.submit."""
        return await self.submission.submit(text)
