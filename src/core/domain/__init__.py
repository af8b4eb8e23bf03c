"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) and shared enums live here.
- The domain knows nothing about the terminal, Typer or subprocesses.
"""
