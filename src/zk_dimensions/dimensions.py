"""Parsers from raw tokens to dimension enumerations.

Matching is case-sensitive and exact: no trimming, no aliases.
"""

from __future__ import annotations

from zk_dimensions.constants import (
    BACKEND_DIMENSION,
    BELLMAN,
    BLS12_377,
    BLS12_381,
    BN128,
    BW6_761,
    CURVE_DIMENSION,
    G16,
    GM17,
    LIBSNARK,
    PGHR13,
    PROVING_SCHEME_DIMENSION,
    ZEXE,
)
from zk_dimensions.errors import UnknownIdentifierError
from zk_dimensions.features import Features, is_available
from zk_dimensions.types import Backend, Curve, ProvingScheme


def parse_backend(token: str, *, features: Features | None = None) -> Backend:
    if token == BELLMAN:
        return Backend.BELLMAN
    if token == ZEXE:
        return Backend.ZEXE
    if token == LIBSNARK and is_available(Backend.LIBSNARK, features):
        return Backend.LIBSNARK
    raise UnknownIdentifierError(BACKEND_DIMENSION, token)


def parse_curve(token: str, *, features: Features | None = None) -> Curve:
    if token == BN128:
        return Curve.BN128
    if token == BLS12_381:
        return Curve.BLS12_381
    if token == BLS12_377:
        return Curve.BLS12_377
    if token == BW6_761:
        return Curve.BW6_761
    raise UnknownIdentifierError(CURVE_DIMENSION, token)


def parse_proving_scheme(token: str, *, features: Features | None = None) -> ProvingScheme:
    if token == G16:
        return ProvingScheme.G16
    if token == GM17:
        return ProvingScheme.GM17
    if token == PGHR13 and is_available(ProvingScheme.PGHR13, features):
        return ProvingScheme.PGHR13
    raise UnknownIdentifierError(PROVING_SCHEME_DIMENSION, token)
