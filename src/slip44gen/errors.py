# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for slip44gen."""

from __future__ import annotations


class Slip44Error(Exception):
    """Base class for slip44gen errors."""


class NameNormalizationError(Slip44Error, ValueError):
    """A display name cannot be turned into an identifier.

    Raised for irregular names that have no curated override. Callers skip
    the offending row and log the name so an override can be added.
    """

    def __init__(self, name: str, reason: str = "unknown original coin name"):
        self.name = name
        self.reason = reason
        super().__init__(f"{reason} `{name}`")


class TableHeaderNotFoundError(Slip44Error):
    """The registry document does not contain the expected table header."""

    def __init__(self, header: str):
        self.header = header
        super().__init__(f"Table header not found in source document: {header!r}")


class DuplicateNameError(Slip44Error):
    """Disambiguation left two coins with the same identifier."""

    def __init__(self, names):
        self.names = list(names)
        super().__init__(f"Names still duplicated after disambiguation: {', '.join(self.names)}")
