"""Integration tests for components working together as a system.

Coverage:
    - Full chat turns from submission through rendering and scroll-follow
    - HTTP application shell with real requests
    - Live Gemini replies (when configured)

Live tests require GOOGLE_API_KEY and are skipped without it.
"""
