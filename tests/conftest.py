"""
Shared fixtures for house pricing tests.
"""

import numpy as np
import pytest

from house_pricing.data.records import FEATURE_NAMES, HouseFeatures, HouseSample


def to_samples(values: np.ndarray, prices: np.ndarray):
    """Build `HouseSample`s from an (n, 7) feature array and n prices."""
    return [
        HouseSample(HouseFeatures(*row), price)
        for row, price in zip(values, prices)
    ]


@pytest.fixture
def unit_features():
    """30 rows of well-conditioned features, uniform on [0, 10)."""
    rng = np.random.default_rng(seed=1)
    return rng.uniform(0, 10, size=(30, len(FEATURE_NAMES)))


@pytest.fixture
def house_features():
    """60 rows of features with realistic magnitudes."""
    rng = np.random.default_rng(seed=2)
    n = 60
    return np.column_stack(
        [
            rng.uniform(800, 4000, size=n),  # square_feet
            rng.integers(1, 7, size=n),  # bedrooms
            rng.integers(1, 5, size=n),  # bathrooms
            rng.integers(1950, 2021, size=n),  # year_built
            rng.uniform(2000, 20000, size=n),  # lot_size
            rng.integers(0, 4, size=n),  # garage_spaces
            rng.uniform(1, 10, size=n),  # location_score
        ]
    ).astype(float)


@pytest.fixture
def noisy_house_samples(house_features):
    """Realistic training set with a linear price signal plus noise."""
    rng = np.random.default_rng(seed=3)
    coefficients = np.array([120.0, 8000.0, 12000.0, 300.0, 2.5, 7000.0, 15000.0])
    prices = (
        -450000.0
        + house_features @ coefficients
        + rng.normal(0, 20000, size=len(house_features))
    )
    return to_samples(house_features, prices)


@pytest.fixture
def houses_csv(tmp_path, noisy_house_samples):
    """Write the noisy training set to CSV, with extra id/created_at columns."""
    rows = []
    for i, sample in enumerate(noisy_house_samples):
        row = {"id": f"house-{i}"}
        row.update(sample.features.as_dict())
        row["actual_price"] = sample.actual_price
        row["created_at"] = "2024-01-01T00:00:00Z"
        rows.append(row)

    header = list(rows[0].keys())
    lines = [",".join(header)]
    for row in rows:
        lines.append(",".join(str(row[col]) for col in header))

    file_path = tmp_path / "houses.csv"
    file_path.write_text("\n".join(lines) + "\n")
    return str(file_path)


@pytest.fixture
def make_samples():
    """Factory turning feature arrays and prices into samples."""
    return to_samples
