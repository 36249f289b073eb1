"""Unit tests for InputSubmissionHandler."""

import asyncio
from unittest.mock import MagicMock

import pytest
import pytest_check as check

from gemini_chat.chat.scroll import ScrollFollowController
from gemini_chat.chat.session import ChatSession
from gemini_chat.models.schemas import Role, ScrollMetrics
from tests.conftest import ControlledSession, ScriptedSession, settle


class TestRejection:
    """Tests for inputs that must not start a turn."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t ", None])
    async def test_rejects_blank_input(self, text: str | None) -> None:
        """Empty or whitespace-only input changes nothing."""
        backend_session = ScriptedSession(chunks=["x"])
        clear_input = MagicMock()
        session = ChatSession(backend_session, clear_input=clear_input)

        accepted = await session.submit(text)

        check.is_false(accepted)
        check.equal(len(session.transcript), 0)
        check.is_false(session.is_loading)
        check.equal(backend_session.sent, [])
        clear_input.assert_not_called()

    async def test_rejects_while_loading(self, controlled_session: ControlledSession) -> None:
        """A second submission during an active request is ignored."""
        session = ChatSession(controlled_session)
        first = asyncio.create_task(session.submit("first"))
        await settle()
        before = session.transcript.messages

        accepted = await session.submit("second")

        check.is_false(accepted)
        check.equal(session.transcript.messages, before)
        check.is_true(session.is_loading)
        check.equal(controlled_session.sent, ["first"])

        controlled_session.finish()
        await first

    def test_can_submit(self) -> None:
        """can_submit mirrors the submission preconditions."""
        session = ChatSession(ScriptedSession())

        check.is_true(session.submission.can_submit("hi"))
        check.is_false(session.submission.can_submit("  "))
        session.is_loading = True
        check.is_false(session.submission.can_submit("hi"))


class TestAcceptance:
    """Tests for accepted submissions."""

    async def test_appends_user_turn_with_original_text(self) -> None:
        """The user turn keeps the text exactly as entered."""
        session = ChatSession(ScriptedSession(chunks=["ok"]))

        accepted = await session.submit("  Hello  ")

        check.is_true(accepted)
        check.equal(session.transcript.messages[0].role, Role.USER)
        check.equal(session.transcript.messages[0].text, "  Hello  ")

    async def test_clears_input(self) -> None:
        """The input surface is cleared once text is accepted."""
        clear_input = MagicMock()
        session = ChatSession(ScriptedSession(chunks=["ok"]), clear_input=clear_input)

        await session.submit("Hello")

        clear_input.assert_called_once_with()

    async def test_grows_by_two_before_first_chunk(
        self, controlled_session: ControlledSession
    ) -> None:
        """A user turn and an empty model turn exist before any chunk."""
        session = ChatSession(controlled_session)

        task = asyncio.create_task(session.submit("Hello"))
        await settle()

        check.equal(
            [(m.role, m.text) for m in session.transcript],
            [(Role.USER, "Hello"), (Role.MODEL, "")],
        )
        check.is_true(session.is_loading)

        controlled_session.finish()
        check.is_true(await task)
        check.is_false(session.is_loading)

    async def test_resets_scroll_follow_before_appending(self) -> None:
        """A new submission always scrolls the user's message into view."""
        scroll_to_bottom = MagicMock()
        scroll = ScrollFollowController(scroll_to_bottom=scroll_to_bottom)
        scroll.handle_scroll(ScrollMetrics(scroll_height=3000, scroll_top=0, client_height=500))
        session = ChatSession(ScriptedSession(chunks=["a", "b"]), scroll=scroll)

        await session.submit("Hello")

        check.is_false(scroll.user_scrolled_up)
        # user turn + placeholder + two chunks
        check.equal(scroll_to_bottom.call_count, 4)
