"""Exceptions raised by Rota Pair."""

# Rota Pair
# Copyright (C) 2025  Rota Pair developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


class RotaPairException(Exception):
    """Base class for every error raised by Rota Pair."""


class PreconditionError(RotaPairException, ValueError):
    """The caller broke a usage rule before any work was done.

    Raised for an odd or too small participant count, duplicate
    participants, committing an empty pairing or an empty name.
    """


class StoreFailure(RotaPairException):
    """A history store or participant registry operation failed.

    Parameters
    ----------
    reason : str
        The diagnostic text reported by the store, kept verbatim
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class StyleException(RotaPairException):
    """The application style sheet could not be applied."""
