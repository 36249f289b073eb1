"""Scroll-follow behaviour for the transcript viewport."""

from collections.abc import Callable

from gemini_chat.models.schemas import ScrollMetrics, TranscriptChange

# Distance from the bottom (px) at which the user counts as scrolled away
SCROLL_FOLLOW_THRESHOLD = 50


class ScrollFollowController:
    """Keeps the viewport pinned to the newest content.

    The view follows new content unless the user has scrolled up to read
    earlier turns. Every scroll event re-evaluates that decision, so scrolling
    back near the bottom resumes following.
    """

    def __init__(
        self,
        scroll_to_bottom: Callable[[], None],
        threshold: float = SCROLL_FOLLOW_THRESHOLD,
    ) -> None:
        """Initialize the controller.

        Args:
            scroll_to_bottom: Moves the viewport to its maximum scroll position.
            threshold: Distance from the bottom (px) that disables following.
        """
        self._scroll_to_bottom = scroll_to_bottom
        self._threshold = threshold
        self.user_scrolled_up = False

    def handle_scroll(self, metrics: ScrollMetrics) -> None:
        """Re-evaluate follow mode from the latest viewport measurements."""
        self.user_scrolled_up = metrics.distance_from_bottom >= self._threshold

    def handle_transcript_change(self, change: TranscriptChange | None = None) -> None:
        """Scroll to the bottom after a transcript mutation unless scrolled away."""
        if self.user_scrolled_up:
            return
        self._scroll_to_bottom()

    def reset(self) -> None:
        """Re-enable following, e.g. when the user sends a new message."""
        self.user_scrolled_up = False
