"""Canonical tokens accepted for each dimension."""

from __future__ import annotations

BACKEND_DIMENSION = "backend"
CURVE_DIMENSION = "curve"
PROVING_SCHEME_DIMENSION = "proving scheme"

BELLMAN = "bellman"
ZEXE = "zexe"
LIBSNARK = "libsnark"

BN128 = "bn128"
BLS12_381 = "bls12_381"
BLS12_377 = "bls12_377"
BW6_761 = "bw6_761"

G16 = "g16"
GM17 = "gm17"
PGHR13 = "pghr13"
