"""Agno agent service backed by Google Gemini.

Backend collaborator for the chat core. It opens one agent session per chat
view and answers messages either as a stream of text chunks or as one
complete response.

Architecture Decisions:

1. **In-memory storage per session** - Conversation context only has to live
   as long as the chat view, so each session gets its own agno InMemoryDb.
   The history is released together with the session handle. Nothing is
   written to disk.

2. **One Agent per session** - ``create_session`` takes the model name and
   the prior turns, so each view gets an Agent built for that model with
   its seed history as additional input.

3. **Errors propagate** - Failures are raised to the caller instead of being
   folded into the text. Agno sometimes reports errors as a RunError event or
   an error run status rather than raising; those become BackendError so the
   chat core handles every failure the same way.

4. **Singleton service** - The service only holds configuration; the
   module-level singleton reuses it across page loads.
"""

import logging
import uuid
from collections.abc import AsyncIterator, Sequence

from agno.agent import Agent
from agno.db.in_memory import InMemoryDb
from agno.models.google import Gemini
from agno.models.message import Message as AgnoMessage
from agno.run.agent import RunEvent
from agno.run.base import RunStatus

from gemini_chat.agent.config import AgentConfig, get_agent_config
from gemini_chat.models.schemas import ChatResponse, Chunk, Message, Role

logger = logging.getLogger(__name__)

# Prior runs replayed into the model context on every turn
NUM_HISTORY_RUNS = 20

_AGNO_ROLES = {
    Role.USER: "user",
    Role.MODEL: "assistant",
}


class BackendError(Exception):
    """Raised when the agent reports a failed run."""

    pass


class AgentSession:
    """An open conversation with the agent.

    All messages sent through one session share a session_id, so agno
    replays earlier turns as context.
    """

    def __init__(self, agent: Agent, session_id: str | None = None) -> None:
        self._agent = agent
        self._session_id = session_id or str(uuid.uuid4())

    @property
    def session_id(self) -> str:
        return self._session_id

    async def send_message(self, text: str) -> ChatResponse:
        """Get the complete response for a message.

        Args:
            text: The user's message.

        Returns:
            The full response text.

        Raises:
            BackendError: If the agent run ended in an error state.
        """
        response = await self._agent.arun(text, session_id=self._session_id)

        if response.status == RunStatus.error:
            raise BackendError(response.content or "Agent run failed")

        return ChatResponse(text=str(response.content or ""))

    async def send_message_stream(self, text: str) -> AsyncIterator[Chunk]:
        """Open a streamed request for a message.

        Args:
            text: The user's message.

        Returns:
            Async iterator of response chunks in arrival order.
        """
        return self._stream(text)

    async def _stream(self, text: str) -> AsyncIterator[Chunk]:
        response_stream = self._agent.arun(
            text,
            session_id=self._session_id,
            stream=True,
        )

        async for event in response_stream:
            kind = getattr(event, "event", None)
            if kind == RunEvent.run_error:
                raise BackendError(getattr(event, "content", None) or "Agent run failed")
            if kind == RunEvent.run_content and event.content:
                yield Chunk(text=str(event.content))


class AgentService:
    """Service for creating Gemini-backed agent sessions.

    Wraps agno with:
    - Gemini model construction from AgentConfig
    - Per-session in-memory history storage
    - Session handles exposing single-shot and streamed replies
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the agent service.

        Args:
            config: Optional agent configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()

    @property
    def config(self) -> AgentConfig:
        return self._config

    def _create_storage(self) -> InMemoryDb:
        """Create in-memory storage for session history.

        Returns:
            A fresh InMemoryDb owned by a single session.
        """
        return InMemoryDb()

    def _create_model(self, model_name: str) -> Gemini:
        """Create the Gemini model for a session.

        Args:
            model_name: Gemini model identifier.

        Returns:
            Configured Gemini model.
        """
        return Gemini(
            id=model_name,
            api_key=self._config.api_key or None,
            temperature=self._config.temperature,
            max_output_tokens=self._config.max_tokens,
        )

    def _create_agent(self, model_name: str, history: Sequence[Message]) -> Agent:
        """Create an agno agent for one chat session.

        Args:
            model_name: Gemini model identifier.
            history: Prior turns to seed the conversation with.

        Returns:
            Configured Agent with Gemini model and in-memory storage.
        """
        seed = [AgnoMessage(role=_AGNO_ROLES[m.role], content=m.text) for m in history]

        return Agent(
            model=self._create_model(model_name),
            db=self._create_storage(),
            description="A helpful assistant.",
            additional_input=seed or None,
            add_history_to_context=True,
            num_history_runs=NUM_HISTORY_RUNS,
            # Responses are rendered as markdown in the UI
            markdown=True,
        )

    def create_session(
        self,
        model: str | None = None,
        history: Sequence[Message] = (),
    ) -> AgentSession:
        """Open a new conversation.

        Args:
            model: Gemini model identifier (defaults to the configured model).
            history: Prior turns, oldest first.

        Returns:
            Session handle for sending messages.
        """
        model_name = model or self._config.model_name
        session = AgentSession(self._create_agent(model_name, history))
        logger.info(
            f"Created agent session {session.session_id[:8]} "
            f"(model={model_name}, history={len(history)})"
        )
        return session


# Module-level singleton instance
_agent_service: AgentService | None = None


def get_agent_service() -> AgentService:
    """Get or create the global agent service.

    Returns:
        The AgentService instance.
    """
    global _agent_service
    if _agent_service is None:
        _agent_service = AgentService()
    return _agent_service
