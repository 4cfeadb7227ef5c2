"""Supported (backend, curve, proving scheme) combinations and validation."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator

from zk_dimensions.dimensions import parse_backend, parse_curve, parse_proving_scheme
from zk_dimensions.errors import DimensionsError, UnsupportedCombinationError
from zk_dimensions.features import Features, gated_combinations
from zk_dimensions.types import Backend, Combination, Curve, ProvingScheme

logger = logging.getLogger(__name__)

BASELINE_COMBINATIONS: tuple[Combination, ...] = (
    (Backend.BELLMAN, Curve.BN128, ProvingScheme.G16),
    (Backend.BELLMAN, Curve.BLS12_381, ProvingScheme.G16),
    (Backend.ZEXE, Curve.BLS12_377, ProvingScheme.GM17),
    (Backend.ZEXE, Curve.BW6_761, ProvingScheme.GM17),
    (Backend.ZEXE, Curve.BN128, ProvingScheme.GM17),
)


def supported_combinations(features: Features | None = None) -> tuple[Combination, ...]:
    return BASELINE_COMBINATIONS + gated_combinations(features)


def is_supported(
    backend: Backend,
    curve: Curve,
    proving_scheme: ProvingScheme,
    *,
    features: Features | None = None,
) -> bool:
    return (backend, curve, proving_scheme) in supported_combinations(features)


def check_combination(
    backend: Backend,
    curve: Curve,
    proving_scheme: ProvingScheme,
    *,
    features: Features | None = None,
    tokens: tuple[str, str, str] | None = None,
) -> None:
    """Raise ``UnsupportedCombinationError`` unless the triple is supported.

    ``tokens`` are the strings the caller originally typed; the error message
    repeats them verbatim. Without them the canonical tokens are reported.
    """
    if is_supported(backend, curve, proving_scheme, features=features):
        return
    if tokens is None:
        tokens = (str(backend), str(curve), str(proving_scheme))
    logger.debug("rejected unsupported combination %s/%s/%s", *tokens)
    raise UnsupportedCombinationError(*tokens)


class Dimensions(BaseModel):
    """A supported (backend, curve, proving scheme) triple.

    Construction runs the compatibility check, so an instance always names a
    supported combination. The feature set comes from the validation context
    (``context={"features": ...}``) and defaults to no optional features.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    backend: Backend
    curve: Curve
    proving_scheme: ProvingScheme

    @model_validator(mode="after")
    def _check_supported(self, info: ValidationInfo) -> Dimensions:
        context = info.context or {}
        check_combination(
            self.backend,
            self.curve,
            self.proving_scheme,
            features=context.get("features"),
            tokens=context.get("tokens"),
        )
        return self

    def as_tuple(self) -> Combination:
        return (self.backend, self.curve, self.proving_scheme)


def validate(
    backend: str,
    curve: str,
    proving_scheme: str,
    *,
    features: Features | None = None,
) -> Dimensions:
    """Parse three raw tokens and return the supported ``Dimensions``.

    Dimensions are parsed in order (backend, curve, proving scheme) and the
    first unknown token is reported. A parsed triple that is not supported
    raises ``UnsupportedCombinationError`` naming the tokens as given.
    """
    parsed_backend = parse_backend(backend, features=features)
    parsed_curve = parse_curve(curve, features=features)
    parsed_scheme = parse_proving_scheme(proving_scheme, features=features)

    dimensions = Dimensions.model_validate(
        {"backend": parsed_backend, "curve": parsed_curve, "proving_scheme": parsed_scheme},
        context={"features": features, "tokens": (backend, curve, proving_scheme)},
    )
    logger.debug("accepted combination %s/%s/%s", backend, curve, proving_scheme)
    return dimensions


def check_dimensions(
    backend: str,
    curve: str,
    proving_scheme: str,
    *,
    features: Features | None = None,
) -> tuple[bool, str]:
    try:
        validate(backend, curve, proving_scheme, features=features)
    except DimensionsError as exc:
        return False, str(exc)
    return True, "ok"
