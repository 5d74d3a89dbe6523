"""Domain models and entities.

Why:
- Pure, immutable data structures (Pydantic v2) plus the error taxonomy and
  the request result type.
- The domain knows nothing about HTTP, the CLI or storage: only review-platform
  concepts.
"""
