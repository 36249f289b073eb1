"""NiceGUI interface - thin rendering layer for the chat transcript.

Responsibilities:
    - Message bubbles (markdown for model turns, plain text for user turns)
    - In-place updates of the streaming turn with a typing indicator
    - Forwarding scroll events to the scroll-follow controller
    - Disabling input while a request is in flight

Contains no conversation logic; everything goes through ChatSession.
"""
