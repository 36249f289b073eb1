"""Main application entry point.

Runs FastAPI (port 8000) with the NiceGUI chat page mounted on it.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI serves the health probe and docs, NiceGUI serves the chat page.
    Both accessible on port 8000.
    """
    import uvicorn
    from nicegui import ui

    from gemini_chat.api.app import create_app
    from gemini_chat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="Gemini Chat",
        favicon="✨",
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting integrated server on http://localhost:{port}")
    logger.info(f"Health probe available at http://localhost:{port}/health")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_standalone() -> None:
    """Run the NiceGUI chat page on its own server (port 8080)."""
    from gemini_chat.ui.chat_page import main as run_chat_page

    logger.info("Starting NiceGUI on http://localhost:8080")
    run_chat_page()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=standalone to serve only the NiceGUI page.
    Default is integrated mode (FastAPI + NiceGUI on port 8000).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Gemini Chat in {mode} mode")

    if mode == "standalone":
        run_standalone()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
