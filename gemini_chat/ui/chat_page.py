"""NiceGUI chat interface rendering a streamed transcript."""

from dataclasses import dataclass
from datetime import datetime

from nicegui import ui
from nicegui.events import ScrollEventArguments

from gemini_chat.agent.chat_agent import get_agent_service
from gemini_chat.agent.config import get_agent_config
from gemini_chat.chat.scroll import ScrollFollowController
from gemini_chat.chat.session import ChatSession
from gemini_chat.models.schemas import ChangeKind, Message, Role, ScrollMetrics, TranscriptChange

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #4285f4 0%, #9b72cb 100%); }

    .message-user {
        background: #e8eefc;
        color: #1f2937;
        border-radius: 18px 18px 4px 18px;
    }

    .message-model {
        color: #1f2937;
        border-radius: 18px;
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: #4285f4;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .input-box {
        background: #f9fafb;
        border: 1px solid #e5e7eb;
        border-radius: 9999px;
        transition: border-color 0.2s;
    }
    .input-box:focus-within { border-color: #4285f4; }

    .message-model pre { margin: 0.5rem 0; }
    .message-model code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""


def scroll_metrics_from_event(e: ScrollEventArguments) -> ScrollMetrics:
    """Translate a scroll area event into viewport measurements."""
    return ScrollMetrics(
        scroll_height=e.vertical_size,
        scroll_top=e.vertical_position,
        client_height=e.vertical_container_size,
    )


def bubble_classes(role: Role) -> tuple[str, str]:
    """Return (row alignment, bubble style) classes for a message role."""
    if role is Role.USER:
        return "justify-end", "message-user max-w-[80%]"
    return "justify-start", "message-model w-full"


@dataclass
class _Bubble:
    body: ui.markdown | ui.label
    indicator: ui.row | None = None


class TranscriptView:
    """Renders transcript changes into a NiceGUI column.

    Appended turns add a bubble; updates rewrite the last bubble in place so
    a streaming response grows without re-rendering the whole history.
    """

    def __init__(self, container: ui.column) -> None:
        self._container = container
        self._bubbles: list[_Bubble] = []
        self._render_empty_state()

    def _render_empty_state(self) -> None:
        with self._container, ui.column().classes("w-full h-64 items-center justify-center gap-3"):
            ui.icon("forum").classes("text-5xl text-gray-300")
            ui.label("Start a conversation").classes("text-lg text-gray-400")

    def _render_message(self, msg: Message) -> _Bubble:
        align, bubble = bubble_classes(msg.role)
        is_user = msg.role is Role.USER

        with ui.row().classes(f"w-full {align}"), ui.column().classes("gap-1"):
            with ui.element("div").classes(f"px-5 py-4 {bubble}").mark("message-bubble"):
                if is_user:
                    body = ui.label(msg.text).classes("text-sm whitespace-pre-wrap")
                    indicator = None
                else:
                    with ui.row().classes("gap-1 items-center").mark("typing-indicator") as indicator:
                        for _ in range(3):
                            ui.element("div").classes("typing-dot")
                    indicator.set_visibility(not msg.text)
                    body = ui.markdown(msg.text).classes("text-sm leading-relaxed")
            ui.label(datetime.now().strftime("%I:%M %p")).classes(
                f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
            )
        return _Bubble(body=body, indicator=indicator)

    def handle_change(self, change: TranscriptChange) -> None:
        """Apply one transcript change to the view."""
        if change.kind == ChangeKind.APPENDED:
            if not self._bubbles:
                self._container.clear()
            with self._container:
                self._bubbles.append(self._render_message(change.message))
            return

        bubble = self._bubbles[change.index]
        if isinstance(bubble.body, ui.markdown):
            bubble.body.set_content(change.message.text)
        else:
            bubble.body.set_text(change.message.text)
        if bubble.indicator is not None:
            bubble.indicator.set_visibility(not change.message.text)


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    config = get_agent_config()

    scroll_area: ui.scroll_area
    input_field: ui.textarea

    def on_scroll(e: ScrollEventArguments) -> None:
        scroll.handle_scroll(scroll_metrics_from_event(e))

    def clear_input() -> None:
        input_field.set_value("")

    async def send_message() -> None:
        await session.submit(input_field.value)

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                ui.icon("auto_awesome").classes("text-white text-3xl")
                ui.label("Gemini Chat").classes("text-lg font-semibold text-white")
            ui.label(config.model_name).classes("text-xs text-white/80 font-mono")

        # Messages
        scroll_area = ui.scroll_area(on_scroll=on_scroll).classes("flex-grow w-full bg-gray-50")
        with scroll_area, ui.column().classes("w-full p-5"):
            messages_container = ui.column().classes("w-full gap-5")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-center bg-white border-t"):
            with ui.element("div").classes("flex-grow input-box px-4 py-1"):
                input_field = (
                    ui.textarea(placeholder="Ask anything...")
                    .props("autogrow borderless dense rows=1")
                    .classes("w-full")
                    .on("keydown.enter.prevent", send_message)
                )
            send_btn = ui.button(icon="arrow_upward", on_click=send_message).props(
                "round unelevated color=primary"
            )

    view = TranscriptView(messages_container)
    scroll = ScrollFollowController(scroll_to_bottom=lambda: scroll_area.scroll_to(percent=1.0))
    session = ChatSession.open(
        get_agent_service(),
        config.model_name,
        streaming=config.streaming,
        scroll=scroll,
        clear_input=clear_input,
        renderer=view.handle_change,
    )

    input_field.bind_enabled_from(session, "is_loading", backward=lambda loading: not loading)
    send_btn.bind_enabled_from(session, "is_loading", backward=lambda loading: not loading)


def main() -> None:
    ui.run(title="Gemini Chat", port=8080, reload=False)


if __name__ == "__main__":
    main()
