"""Gemini Chat - interactive chat client with token-streamed responses.

Combines NiceGUI for the chat view, Agno with Google Gemini for generation,
FastAPI for hosting, and Pydantic for data models and configuration.

Components:
    - chat: Session controller (transcript, streaming ingestion, scroll-follow)
    - agent: Gemini backend sessions via Agno
    - ui: Web interface rendering the transcript
    - api: HTTP application shell
    - models: Shared data models
"""

__version__ = "0.1.0"
