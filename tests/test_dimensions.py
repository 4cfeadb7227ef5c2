from __future__ import annotations

import pytest

from zk_dimensions.dimensions import parse_backend, parse_curve, parse_proving_scheme
from zk_dimensions.errors import UnknownIdentifierError
from zk_dimensions.features import Features
from zk_dimensions.types import Backend, Curve, ProvingScheme


@pytest.mark.parametrize(
    ("token", "expected"),
    [("bellman", Backend.BELLMAN), ("zexe", Backend.ZEXE)],
)
def test_parse_backend_known_tokens(token: str, expected: Backend) -> None:
    assert parse_backend(token) is expected


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("bn128", Curve.BN128),
        ("bls12_381", Curve.BLS12_381),
        ("bls12_377", Curve.BLS12_377),
        ("bw6_761", Curve.BW6_761),
    ],
)
def test_parse_curve_known_tokens(token: str, expected: Curve) -> None:
    assert parse_curve(token) is expected


@pytest.mark.parametrize(
    ("token", "expected"),
    [("g16", ProvingScheme.G16), ("gm17", ProvingScheme.GM17)],
)
def test_parse_proving_scheme_known_tokens(token: str, expected: ProvingScheme) -> None:
    assert parse_proving_scheme(token) is expected


def test_unknown_backend_names_dimension_and_token() -> None:
    with pytest.raises(UnknownIdentifierError) as caught:
        parse_backend("bogus")
    assert caught.value.dimension == "backend"
    assert caught.value.token == "bogus"
    assert str(caught.value) == "Unknown backend bogus"


def test_unknown_curve_message() -> None:
    with pytest.raises(UnknownIdentifierError, match=r"^Unknown curve secp256k1$"):
        parse_curve("secp256k1")


def test_unknown_proving_scheme_message() -> None:
    with pytest.raises(UnknownIdentifierError) as caught:
        parse_proving_scheme("plonk")
    assert caught.value.dimension == "proving scheme"
    assert str(caught.value) == "Unknown proving scheme plonk"


@pytest.mark.parametrize("token", ["BN128", "Bn128", " bn128", "bn128 ", "bn-128", ""])
def test_curve_matching_is_case_sensitive_and_untrimmed(token: str) -> None:
    with pytest.raises(UnknownIdentifierError):
        parse_curve(token)


@pytest.mark.parametrize("token", ["Bellman", "BELLMAN", "bellman\n"])
def test_backend_matching_is_case_sensitive_and_untrimmed(token: str) -> None:
    with pytest.raises(UnknownIdentifierError):
        parse_backend(token)


def test_non_string_token_is_unknown() -> None:
    with pytest.raises(UnknownIdentifierError, match="Unknown proving scheme 16"):
        parse_proving_scheme(16)  # type: ignore[arg-type]


def test_gated_tokens_unknown_without_feature() -> None:
    with pytest.raises(UnknownIdentifierError, match="Unknown backend libsnark"):
        parse_backend("libsnark")
    with pytest.raises(UnknownIdentifierError, match="Unknown proving scheme pghr13"):
        parse_proving_scheme("pghr13", features=Features(libsnark=False))


def test_gated_tokens_parse_with_feature() -> None:
    features = Features(libsnark=True)
    assert parse_backend("libsnark", features=features) is Backend.LIBSNARK
    assert parse_proving_scheme("pghr13", features=features) is ProvingScheme.PGHR13


def test_every_member_value_round_trips_with_all_features() -> None:
    features = Features.all()
    for member in Backend:
        assert parse_backend(str(member), features=features) is member
    for member in Curve:
        assert parse_curve(str(member), features=features) is member
    for member in ProvingScheme:
        assert parse_proving_scheme(str(member), features=features) is member
