"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- Inverts dependencies: the core depends on abstractions only.
"""

from core.interfaces.access import AccessProbe

__all__ = ["AccessProbe"]
