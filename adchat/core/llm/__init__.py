"""LLM integration layer.

This package is intentionally small:
- No prompt/output logging (chat contents stay out of logs).
- Configurable via environment variables.
- One attempt per call; retries are the caller's concern.
"""
