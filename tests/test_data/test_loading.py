"""
Unit tests for loading training data from CSV.
"""

import numpy as np
import pandas as pd
import pytest

from house_pricing.data.loading import (
    REQUIRED_COLUMNS,
    load_training_data,
    samples_from_dataframe,
    samples_to_dataframe,
)


class TestLoadTrainingData:
    """Tests for `load_training_data`."""

    def test_load_csv(self, houses_csv, noisy_house_samples):
        samples = load_training_data(houses_csv)
        assert len(samples) == len(noisy_house_samples)
        np.testing.assert_allclose(
            [s.features.as_tuple() for s in samples],
            [s.features.as_tuple() for s in noisy_house_samples],
            rtol=1e-12,
        )
        assert samples[-1].actual_price == pytest.approx(noisy_house_samples[-1].actual_price)

    def test_verbose_output(self, houses_csv, capsys):
        load_training_data(houses_csv, verbose=True)
        captured = capsys.readouterr()
        assert "Loading training data" in captured.out
        assert "Built 60 training samples" in captured.out

    def test_missing_column(self, tmp_path):
        file_path = tmp_path / "houses.csv"
        pd.DataFrame({"square_feet": [1000], "actual_price": [100000]}).to_csv(
            file_path, index=False
        )
        with pytest.raises(ValueError, match="bedrooms"):
            load_training_data(str(file_path))


class TestDataFrameConversion:
    """Tests for dataframe conversion helpers."""

    def test_missing_values_rejected(self, noisy_house_samples):
        df = samples_to_dataframe(noisy_house_samples)
        df.loc[3, "lot_size"] = None
        with pytest.raises(ValueError, match="lot_size"):
            samples_from_dataframe(df)

    def test_columns_and_order(self, noisy_house_samples):
        df = samples_to_dataframe(noisy_house_samples)
        assert list(df.columns) == REQUIRED_COLUMNS
        assert samples_from_dataframe(df) == noisy_house_samples

    def test_empty_dataframe(self):
        assert samples_from_dataframe(pd.DataFrame(columns=REQUIRED_COLUMNS)) == []
