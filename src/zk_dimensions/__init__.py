"""zk-dimensions public surface."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version

from zk_dimensions.compatibility import (
    BASELINE_COMBINATIONS,
    Dimensions,
    check_combination,
    check_dimensions,
    is_supported,
    supported_combinations,
    validate,
)
from zk_dimensions.config import ConfigError, load_features
from zk_dimensions.dimensions import parse_backend, parse_curve, parse_proving_scheme
from zk_dimensions.errors import (
    DimensionsError,
    UnknownIdentifierError,
    UnsupportedCombinationError,
)
from zk_dimensions.features import KNOWN_FEATURES, Features
from zk_dimensions.types import Backend, Curve, ProvingScheme

try:
    __version__ = pkg_version("zk-dimensions")
except PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "DimensionsError",
    "UnknownIdentifierError",
    "UnsupportedCombinationError",
    "ConfigError",
    "Backend",
    "Curve",
    "ProvingScheme",
    "Dimensions",
    "Features",
    "KNOWN_FEATURES",
    "BASELINE_COMBINATIONS",
    "parse_backend",
    "parse_curve",
    "parse_proving_scheme",
    "supported_combinations",
    "is_supported",
    "check_combination",
    "validate",
    "check_dimensions",
    "load_features",
]
