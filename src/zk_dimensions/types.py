"""Dimension enumerations.

Member values are the canonical tokens from ``zk_dimensions.constants``.
Members marked as gated are only reachable from a token when their optional
feature is enabled (see ``zk_dimensions.features``).
"""

from __future__ import annotations

from enum import Enum

from zk_dimensions import constants


class Backend(Enum):
    BELLMAN = constants.BELLMAN
    ZEXE = constants.ZEXE
    # gated: libsnark
    LIBSNARK = constants.LIBSNARK

    def __str__(self) -> str:
        return self.value


class Curve(Enum):
    BN128 = constants.BN128
    BLS12_381 = constants.BLS12_381
    BLS12_377 = constants.BLS12_377
    BW6_761 = constants.BW6_761

    def __str__(self) -> str:
        return self.value


class ProvingScheme(Enum):
    G16 = constants.G16
    GM17 = constants.GM17
    # gated: libsnark
    PGHR13 = constants.PGHR13

    def __str__(self) -> str:
        return self.value


Combination = tuple[Backend, Curve, ProvingScheme]

__all__ = ["Backend", "Curve", "ProvingScheme", "Combination"]
