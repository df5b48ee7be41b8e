"""Rota Pair: draw pairs for a rotating doubles event without repeats."""

from rotapair.constants import APP_VERSION

__version__ = APP_VERSION
