from __future__ import annotations

import zk_dimensions
from zk_dimensions import Features, UnknownIdentifierError, check_dimensions, validate


def test_public_surface_exports_entry_points() -> None:
    for name in zk_dimensions.__all__:
        assert hasattr(zk_dimensions, name)
    assert isinstance(zk_dimensions.__version__, str)


def test_errors_share_base_class() -> None:
    assert issubclass(UnknownIdentifierError, zk_dimensions.DimensionsError)
    assert issubclass(zk_dimensions.UnsupportedCombinationError, zk_dimensions.DimensionsError)


def test_loaded_features_drive_validation(monkeypatch) -> None:
    monkeypatch.setenv("ZK_DIMENSIONS_FEATURES", "libsnark")
    features = zk_dimensions.load_features()
    assert features == Features(libsnark=True)
    assert validate("libsnark", "bn128", "pghr13", features=features).as_tuple()[0] is (
        zk_dimensions.Backend.LIBSNARK
    )
    assert check_dimensions("libsnark", "bn128", "pghr13") == (
        False,
        "Unknown backend libsnark",
    )
