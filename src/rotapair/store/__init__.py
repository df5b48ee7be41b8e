"""Persistence collaborators: history store and participant registry."""

from rotapair.store.base import HistoryStore, ParticipantRegistry
from rotapair.store.json_file import JsonFileStore
from rotapair.store.memory import MemoryStore

__all__ = ["HistoryStore", "JsonFileStore", "MemoryStore", "ParticipantRegistry"]
