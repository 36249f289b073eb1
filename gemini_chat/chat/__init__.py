"""Chat session controller.

Maintains conversation state and turns user input into streamed backend
responses rendered into the transcript.

Components (leaf-first):
    - transcript: Ordered log of turns with change notifications
    - scroll: Scroll-follow decision for the transcript viewport
    - ingestion: Lifecycle of one outstanding (streamed) request
    - submission: Input validation and the one-request-in-flight gate
    - session: State bundle wiring the above for one chat view

Runs entirely on the event loop; no locking is needed because only one
request may be in flight per session.
"""

from gemini_chat.chat.ingestion import ERROR_NOTICE, StreamingIngestionController
from gemini_chat.chat.protocols import ChatBackend, SessionHandle
from gemini_chat.chat.scroll import SCROLL_FOLLOW_THRESHOLD, ScrollFollowController
from gemini_chat.chat.session import ChatSession
from gemini_chat.chat.submission import InputSubmissionHandler
from gemini_chat.chat.transcript import Transcript

__all__ = [
    "ERROR_NOTICE",
    "SCROLL_FOLLOW_THRESHOLD",
    "ChatBackend",
    "ChatSession",
    "InputSubmissionHandler",
    "ScrollFollowController",
    "SessionHandle",
    "StreamingIngestionController",
    "Transcript",
]
