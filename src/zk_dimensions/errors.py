"""Dimension validation error types."""

from __future__ import annotations


class DimensionsError(RuntimeError):
    """Base dimensions error."""


class UnknownIdentifierError(DimensionsError):
    """A token did not name any known member of its dimension."""

    def __init__(self, dimension: str, token: object) -> None:
        super().__init__(f"Unknown {dimension} {token}")
        self.dimension = dimension
        self.token = token


class UnsupportedCombinationError(DimensionsError):
    """Every token parsed, but the triple is not a supported combination."""

    def __init__(self, backend: str, curve: str, proving_scheme: str) -> None:
        super().__init__(
            "Unsupported combination of dimensions "
            f"(backend: {backend}, curve: {curve}, proving scheme: {proving_scheme})"
        )
        self.backend = backend
        self.curve = curve
        self.proving_scheme = proving_scheme
