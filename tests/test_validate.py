"""
Tests for flock configuration validation.

Every violation must be reported, not just the first one found.
"""

import pytest

from boids import Flock
from boids.validate import (
    Factor,
    FactorAboveOne,
    FactorBelowZero,
    InvalidFlockConfig,
    LocalRadiusNotLargerThanCrowdingRadius,
    NegativeFlockSize,
    check_factor,
    validate_distances,
    validate_factors,
    validate_flock_config,
)


class TestCheckFactor:
    """Tests for a single factor check."""

    @pytest.mark.parametrize("value", [0.0, 0.3, 1.0])
    def test_in_range(self, value):
        assert check_factor(value, Factor.COHESION) is None

    def test_negative(self):
        assert check_factor(-0.1, Factor.ADHESION) == FactorBelowZero(Factor.ADHESION)

    def test_too_large(self):
        assert check_factor(1.01, Factor.REPULSION) == FactorAboveOne(Factor.REPULSION)

    def test_nan_rejected(self):
        """NaN is never a usable factor."""
        assert check_factor(float("nan"), Factor.COHESION) == FactorBelowZero(Factor.COHESION)


class TestValidateFactors:
    """Tests for the combined factor checks."""

    def test_incorrect_factor_inputs(self):
        result = validate_factors(2.0, -4.9, 1.0)
        assert result == [
            FactorAboveOne(Factor.REPULSION),
            FactorBelowZero(Factor.ADHESION),
        ]

    def test_all_valid(self):
        assert validate_factors(0.0, 0.5, 1.0) == []

    def test_all_invalid(self):
        assert len(validate_factors(-1.0, 2.0, -3.0)) == 3


class TestValidateDistances:
    """Tests for the crowding/local radius relationship."""

    def test_local_smaller_than_crowding(self):
        assert validate_distances(20.0, 2.0) == LocalRadiusNotLargerThanCrowdingRadius()

    def test_equal_radii_rejected(self):
        assert validate_distances(5.0, 5.0) == LocalRadiusNotLargerThanCrowdingRadius()

    def test_local_larger(self):
        assert validate_distances(2.0, 20.0) is None

    def test_nan_radius_rejected(self):
        assert validate_distances(float("nan"), 20.0) == LocalRadiusNotLargerThanCrowdingRadius()
        assert validate_distances(2.0, float("nan")) == LocalRadiusNotLargerThanCrowdingRadius()


class TestValidateFlockConfig:
    """Tests for the full configuration check."""

    def test_factor_errors_come_before_distance_error(self):
        errors = validate_flock_config(20.0, 2.0, 2.0, 0.5, 0.5)
        assert errors == [
            FactorAboveOne(Factor.REPULSION),
            LocalRadiusNotLargerThanCrowdingRadius(),
        ]

    def test_valid(self):
        assert validate_flock_config(4.0, 50.0, 0.1, 0.2, 0.3) == []


class TestFlockConstruction:
    """Tests for validation at Flock construction."""

    def test_incorrect_factor_inputs(self):
        with pytest.raises(InvalidFlockConfig) as exc_info:
            Flock(0, 1.0, 50.0, 2.0, -20.2, 1.0)
        assert exc_info.value.errors == [
            FactorAboveOne(Factor.REPULSION),
            FactorBelowZero(Factor.ADHESION),
        ]

    def test_incorrect_distance_inputs(self):
        with pytest.raises(InvalidFlockConfig) as exc_info:
            Flock(0, 20.0, 2.0, 0.5, 0.5, 0.5)
        assert exc_info.value.errors == [LocalRadiusNotLargerThanCrowdingRadius()]

    def test_all_creation_errors_reported(self):
        """Four bad inputs give four errors."""
        with pytest.raises(InvalidFlockConfig) as exc_info:
            Flock(0, 2.0, -4.9, 3.0, 20.0, 2.0)
        assert len(exc_info.value.errors) == 4

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            Flock(10, 1.0, 50.0, -1.0, 0.0, 0.0)

    def test_message_lists_every_error(self):
        with pytest.raises(InvalidFlockConfig) as exc_info:
            Flock(10, 20.0, 2.0, -1.0, 0.0, 0.0)
        message = str(exc_info.value)
        assert "repulsion factor is negative" in message
        assert "crowding environment" in message

    def test_negative_flock_size(self):
        """A negative size is a configuration error, not a numpy failure."""
        with pytest.raises(InvalidFlockConfig) as exc_info:
            Flock(-1, 1.0, 2.0, 0.0, 0.0, 0.0)
        assert exc_info.value.errors == [NegativeFlockSize(-1)]

    def test_negative_size_collected_with_other_errors(self):
        with pytest.raises(InvalidFlockConfig) as exc_info:
            Flock(-3, 20.0, 2.0, float("nan"), 0.0, 0.0)
        assert exc_info.value.errors == [
            FactorBelowZero(Factor.REPULSION),
            LocalRadiusNotLargerThanCrowdingRadius(),
            NegativeFlockSize(-3),
        ]

    def test_valid_config_constructs(self):
        flock = Flock(5, 1.0, 50.0, 0.0, 1.0, 0.5)
        assert len(flock) == 5


class TestErrorDisplay:
    """Tests for human-readable error messages."""

    def test_error_display(self):
        assert str(FactorAboveOne(Factor.ADHESION)) == \
            "adhesion factor is too large and should be at most one"
        assert str(FactorBelowZero(Factor.REPULSION)) == "repulsion factor is negative"
        assert str(LocalRadiusNotLargerThanCrowdingRadius()) == \
            "local environment is smaller than (or equal to) crowding environment"
        assert str(NegativeFlockSize(-2)) == "flock size -2 is negative"
