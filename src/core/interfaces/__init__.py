"""Interfaces/abstracciones del Core.

- Define contratos (Protocol) que implementan adaptadores concretos.
- El Core depende de abstracciones, no de httpx.
"""

from core.interfaces.requester import KanbanRequester

__all__ = ["KanbanRequester"]
