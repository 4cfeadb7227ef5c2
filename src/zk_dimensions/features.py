"""Optional features and what each one unlocks.

A feature extends two things at once: the tokens the parsers recognise and
the combinations the compatibility check accepts. Both are declared here, per
feature, so they can only change together.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum

from zk_dimensions.types import Backend, Combination, Curve, ProvingScheme

LIBSNARK_FEATURE = "libsnark"

KNOWN_FEATURES: tuple[str, ...] = (LIBSNARK_FEATURE,)

_GATED_MEMBERS: dict[str, tuple[Enum, ...]] = {
    LIBSNARK_FEATURE: (Backend.LIBSNARK, ProvingScheme.PGHR13),
}

_GATED_COMBINATIONS: dict[str, tuple[Combination, ...]] = {
    LIBSNARK_FEATURE: (
        (Backend.LIBSNARK, Curve.BN128, ProvingScheme.GM17),
        (Backend.LIBSNARK, Curve.BN128, ProvingScheme.PGHR13),
    ),
}


@dataclass(frozen=True)
class Features:
    libsnark: bool = False

    @classmethod
    def all(cls) -> Features:
        return cls(**{field.name: True for field in fields(cls)})

    def enabled(self) -> tuple[str, ...]:
        return tuple(name for name in KNOWN_FEATURES if getattr(self, name))


NO_FEATURES = Features()


def _resolve(features: Features | None) -> Features:
    return NO_FEATURES if features is None else features


def gated_members(features: Features | None = None) -> frozenset[Enum]:
    """Members unlocked by the enabled features."""
    enabled = _resolve(features).enabled()
    return frozenset(member for name in enabled for member in _GATED_MEMBERS[name])


def locked_members() -> frozenset[Enum]:
    """Every member that needs some optional feature."""
    return frozenset(member for members in _GATED_MEMBERS.values() for member in members)


def is_available(member: Enum, features: Features | None = None) -> bool:
    if member not in locked_members():
        return True
    return member in gated_members(features)


def gated_combinations(features: Features | None = None) -> tuple[Combination, ...]:
    """Extra supported combinations contributed by the enabled features."""
    enabled = _resolve(features).enabled()
    return tuple(combination for name in enabled for combination in _GATED_COMBINATIONS[name])
