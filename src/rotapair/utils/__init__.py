"""Shared helpers for Rota Pair."""

from rotapair.utils.logging import setup_logger

__all__ = ["setup_logger"]
