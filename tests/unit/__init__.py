"""Unit tests for individual components in isolation.

Ensures fast execution with minimal dependencies.

Coverage:
    - chat/: Transcript, scroll-follow, ingestion and submission logic
    - agent/: Agent configuration and agno event handling
    - ui/: Pure rendering helpers

Uses scripted fakes for the backend and mocks for agno classes. Follows
single responsibility per test function. Leverages pytest-check for
multiple assertions per test.
"""
