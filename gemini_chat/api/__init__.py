"""HTTP shell for the chat client.

FastAPI hosts the NiceGUI page and exposes:
    - GET /health: Service health status
"""

from gemini_chat.api.app import app, create_app

__all__ = ["app", "create_app"]
