"""Interfaces of the Core.

Why:
- Defines contracts (Protocol) that concrete adapters implement.
- Inverts dependencies: facades, the pipeline and the CLI depend on
  abstractions, so mocks and real sessions are interchangeable.
"""
