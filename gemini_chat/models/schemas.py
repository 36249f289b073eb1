from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Speaker of a conversation turn."""

    USER = "user"
    MODEL = "model"


class IngestionState(str, Enum):
    """Lifecycle states of one outstanding backend request."""

    IDLE = "idle"
    AWAITING = "awaiting"
    STREAMING = "streaming"
    COMPLETED = "completed"
    FAILED = "failed"


class ChangeKind(str, Enum):
    """How the transcript was mutated."""

    APPENDED = "appended"
    UPDATED = "updated"


class Message(BaseModel):
    """A single conversation turn.

    Messages are frozen. The pending model turn is updated by replacing the
    whole message, so a snapshot taken between two chunks never changes.

    Attributes:
        role: Who authored the turn.
        text: The turn's content (markdown for model turns).
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str = ""


class TranscriptChange(BaseModel):
    """Notification payload sent to transcript listeners.

    Attributes:
        kind: Whether a turn was appended or the last turn was rewritten.
        index: Position of the affected message.
        message: The message as it is after the change.
    """

    model_config = ConfigDict(frozen=True)

    kind: ChangeKind
    index: int = Field(ge=0)
    message: Message


class ScrollMetrics(BaseModel):
    """Viewport measurements reported by a scroll event.

    Attributes:
        scroll_height: Total height of the scrollable content.
        scroll_top: Current offset of the viewport from the top.
        client_height: Visible height of the viewport.
    """

    scroll_height: float = Field(ge=0)
    scroll_top: float
    client_height: float = Field(ge=0)

    @property
    def distance_from_bottom(self) -> float:
        return self.scroll_height - self.scroll_top - self.client_height


class Chunk(BaseModel):
    """One incremental fragment of a streamed response."""

    text: str = ""


class ChatResponse(BaseModel):
    """A complete single-shot response."""

    text: str = ""
