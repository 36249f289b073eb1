"""Test package for Gemini Chat.

Structure:
    - unit/: Individual class and function tests
    - integration/: End-to-end chat and HTTP tests

Leverages pytest with pytest-asyncio and pytest-check for soft assertions.
"""
