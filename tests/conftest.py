"""Pytest fixtures and shared test configuration.

Provides reusable fakes for the backend collaborator and fixtures for unit
and integration tests.

Fixtures:
    - async_client: HTTPX client for the FastAPI app
    - scripted_session: Backend session replaying a fixed list of chunks
    - controlled_session: Backend session the test feeds chunk by chunk
    - backend: Backend factory handing out a scripted session
    - snapshots: Records the transcript after every change

Helpers:
    - settle(): Lets pending event loop callbacks run
"""

import asyncio
from collections.abc import AsyncGenerator, AsyncIterator, Sequence

import pytest
from httpx import ASGITransport, AsyncClient

from gemini_chat.api import app
from gemini_chat.models.schemas import ChatResponse, Chunk, Message, TranscriptChange

_END = object()


async def settle(rounds: int = 10) -> None:
    """Yield to the event loop until background tasks have caught up."""
    for _ in range(rounds):
        await asyncio.sleep(0)


class ScriptedSession:
    """Backend session that replays a fixed list of chunks.

    Args:
        chunks: Chunk texts to yield in order.
        fail_after: Raise after this many chunks have been yielded.
        fail_on_open: Raise when the request is opened.
        response_text: Reply for single-shot requests.
    """

    def __init__(
        self,
        chunks: Sequence[str] = (),
        fail_after: int | None = None,
        fail_on_open: bool = False,
        response_text: str = "",
    ) -> None:
        self.chunks = list(chunks)
        self.fail_after = fail_after
        self.fail_on_open = fail_on_open
        self.response_text = response_text
        self.sent: list[str] = []

    async def send_message(self, text: str) -> ChatResponse:
        self.sent.append(text)
        if self.fail_on_open:
            raise ConnectionError("connection refused")
        return ChatResponse(text=self.response_text)

    async def send_message_stream(self, text: str) -> AsyncIterator[Chunk]:
        self.sent.append(text)
        if self.fail_on_open:
            raise ConnectionError("connection refused")
        return self._stream()

    async def _stream(self) -> AsyncIterator[Chunk]:
        for i, text in enumerate(self.chunks):
            if self.fail_after is not None and i == self.fail_after:
                raise RuntimeError("stream interrupted")
            yield Chunk(text=text)
        if self.fail_after is not None and self.fail_after >= len(self.chunks):
            raise RuntimeError("stream interrupted")


class ControlledSession:
    """Backend session whose stream is fed by the test.

    Chunks are queued with ``push``; ``finish`` ends the stream and ``fail``
    makes the next read raise.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[object] = asyncio.Queue()
        self.sent: list[str] = []

    def push(self, text: str) -> None:
        self._queue.put_nowait(text)

    def finish(self) -> None:
        self._queue.put_nowait(_END)

    def fail(self, error: BaseException | None = None) -> None:
        self._queue.put_nowait(error or RuntimeError("backend error"))

    async def send_message(self, text: str) -> ChatResponse:
        self.sent.append(text)
        item = await self._queue.get()
        if isinstance(item, BaseException):
            raise item
        return ChatResponse(text="" if item is _END else str(item))

    async def send_message_stream(self, text: str) -> AsyncIterator[Chunk]:
        self.sent.append(text)
        return self._stream()

    async def _stream(self) -> AsyncIterator[Chunk]:
        while True:
            item = await self._queue.get()
            if item is _END:
                return
            if isinstance(item, BaseException):
                raise item
            yield Chunk(text=str(item))


class ScriptedBackend:
    """Backend factory that records create_session calls."""

    def __init__(self, handle: object) -> None:
        self.handle = handle
        self.calls: list[tuple[str, list[Message]]] = []

    def create_session(self, model: str, history: Sequence[Message] = ()) -> object:
        self.calls.append((model, list(history)))
        return self.handle


class SnapshotRecorder:
    """Transcript listener recording every change in order."""

    def __init__(self) -> None:
        self.changes: list[TranscriptChange] = []

    def __call__(self, change: TranscriptChange) -> None:
        self.changes.append(change)

    @property
    def texts(self) -> list[str]:
        return [change.message.text for change in self.changes]


@pytest.fixture
def scripted_session() -> ScriptedSession:
    """Return a session streaming "Hi" then " there"."""
    return ScriptedSession(chunks=["Hi", " there"])


@pytest.fixture
def controlled_session() -> ControlledSession:
    """Return a session the test drives chunk by chunk."""
    return ControlledSession()


@pytest.fixture
def backend(scripted_session: ScriptedSession) -> ScriptedBackend:
    """Return a backend handing out the scripted session."""
    return ScriptedBackend(scripted_session)


@pytest.fixture
def snapshots() -> SnapshotRecorder:
    """Return a transcript listener recording every change."""
    return SnapshotRecorder()


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
