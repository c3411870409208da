"""Flock configuration checks.

Every check runs; the violations are collected and raised together so a
caller sees all of them at once.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


class Factor(Enum):
    REPULSION = "repulsion"
    ADHESION = "adhesion"
    COHESION = "cohesion"


@dataclass(frozen=True)
class FactorBelowZero:
    factor: Factor

    def __str__(self) -> str:
        return f"{self.factor.value} factor is negative"


@dataclass(frozen=True)
class FactorAboveOne:
    factor: Factor

    def __str__(self) -> str:
        return f"{self.factor.value} factor is too large and should be at most one"


@dataclass(frozen=True)
class LocalRadiusNotLargerThanCrowdingRadius:
    def __str__(self) -> str:
        return "local environment is smaller than (or equal to) crowding environment"


@dataclass(frozen=True)
class NegativeFlockSize:
    flock_size: int

    def __str__(self) -> str:
        return f"flock size {self.flock_size} is negative"


CreationError = Union[
    FactorBelowZero,
    FactorAboveOne,
    LocalRadiusNotLargerThanCrowdingRadius,
    NegativeFlockSize,
]


class InvalidFlockConfig(ValueError):
    """Raised by Flock construction with every configuration problem found."""

    def __init__(self, errors: List[CreationError]):
        self.errors = list(errors)
        super().__init__("Invalid Flock input: " + "; ".join(str(e) for e in self.errors))


def check_factor(value: float, factor: Factor) -> Optional[CreationError]:
    """Return the violation for a factor outside [0, 1], or None.

    NaN is reported as below zero.
    """
    if value > 1.0:
        return FactorAboveOne(factor)
    if not value >= 0.0:
        return FactorBelowZero(factor)
    return None


def validate_factors(repulsion_factor: float, adhesion_factor: float, cohesion_factor: float) -> List[CreationError]:
    checks = [
        check_factor(repulsion_factor, Factor.REPULSION),
        check_factor(adhesion_factor, Factor.ADHESION),
        check_factor(cohesion_factor, Factor.COHESION),
    ]
    return [error for error in checks if error is not None]


def validate_distances(crowding_radius: float, local_radius: float) -> Optional[CreationError]:
    # NaN radii fail this check too
    if not crowding_radius < local_radius:
        return LocalRadiusNotLargerThanCrowdingRadius()
    return None


def validate_flock_config(
    crowding_radius: float,
    local_radius: float,
    repulsion_factor: float,
    adhesion_factor: float,
    cohesion_factor: float,
    flock_size: int = 0,
) -> List[CreationError]:
    """All violations for a flock configuration: factors, then radii, then size."""
    errors = validate_factors(repulsion_factor, adhesion_factor, cohesion_factor)

    distance_error = validate_distances(crowding_radius, local_radius)
    if distance_error is not None:
        errors.append(distance_error)

    if flock_size < 0:
        errors.append(NegativeFlockSize(flock_size))

    return errors
