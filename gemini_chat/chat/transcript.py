"""Ordered log of conversation turns."""

import logging
from collections.abc import Callable, Iterator

from gemini_chat.models.schemas import ChangeKind, Message, TranscriptChange

logger = logging.getLogger(__name__)

TranscriptListener = Callable[[TranscriptChange], None]


class Transcript:
    """Append-biased store of chat messages.

    Turns are only ever appended. The one exception is the last turn, whose
    text is replaced while a response streams in. There is no removal or
    reordering. Listeners are called after every mutation; a failing listener
    is logged and does not stop the others or the mutation.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._listeners: list[TranscriptListener] = []

    def subscribe(self, listener: TranscriptListener) -> None:
        """Register a callback invoked with each TranscriptChange."""
        self._listeners.append(listener)

    def append(self, message: Message) -> None:
        """Add a new turn at the end of the transcript.

        Args:
            message: The turn to append.
        """
        self._messages.append(message)
        self._notify(
            TranscriptChange(
                kind=ChangeKind.APPENDED,
                index=len(self._messages) - 1,
                message=message,
            )
        )

    def update_last(self, text: str) -> None:
        """Replace the text of the final turn.

        Does nothing when the transcript is empty.

        Args:
            text: The full new text of the last message.
        """
        if not self._messages:
            logger.debug("update_last on empty transcript ignored")
            return

        index = len(self._messages) - 1
        updated = self._messages[index].model_copy(update={"text": text})
        self._messages[index] = updated
        self._notify(TranscriptChange(kind=ChangeKind.UPDATED, index=index, message=updated))

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of all turns in conversation order."""
        return tuple(self._messages)

    @property
    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)

    def _notify(self, change: TranscriptChange) -> None:
        for listener in self._listeners:
            try:
                listener(change)
            except Exception:
                logger.exception(
                    f"Transcript listener failed on {change.kind.value} at index {change.index}"
                )
