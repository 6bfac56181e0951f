"""
Unit tests for training data validation.
"""

import numpy as np

from house_pricing.data.validation import (
    find_constant_features,
    validate_training_data,
)


class TestFindConstantFeatures:
    """Tests for `find_constant_features`."""

    def test_no_constant_features(self, noisy_house_samples):
        assert find_constant_features(noisy_house_samples) == []

    def test_constant_feature(self, unit_features, make_samples):
        values = unit_features.copy()
        values[:, 5] = 2.0
        samples = make_samples(values, np.arange(len(values), dtype=float))
        assert find_constant_features(samples) == ["garage_spaces"]

    def test_empty(self):
        assert find_constant_features([]) == []


class TestValidateTrainingData:
    """Tests for `validate_training_data`."""

    def test_valid_data(self, noisy_house_samples):
        is_valid, errors = validate_training_data(noisy_house_samples)
        assert is_valid
        assert errors == []

    def test_empty_data(self):
        is_valid, errors = validate_training_data([])
        assert not is_valid
        assert errors == ["Training set is empty"]

    def test_too_few_samples(self, unit_features, make_samples):
        samples = make_samples(unit_features[:8], np.arange(8, dtype=float))
        is_valid, errors = validate_training_data(samples)
        assert not is_valid
        assert any("need more than 8" in e for e in errors)

    def test_identical_prices(self, unit_features, make_samples):
        samples = make_samples(unit_features, np.full(len(unit_features), 1.0))
        is_valid, errors = validate_training_data(samples)
        assert not is_valid
        assert any("identical" in e for e in errors)

    def test_verbose_output(self, capsys):
        validate_training_data([], verbose=True)
        captured = capsys.readouterr()
        assert "Validation failed with 1 error(s)" in captured.out
