"""
Record types for house data.

The seven features always appear in the order given by `FEATURE_NAMES`.
Design matrix columns, fitted coefficients and prediction inputs all follow
this order.
"""

import math
from dataclasses import dataclass, fields
from typing import Mapping, Tuple

FEATURE_NAMES = (
    "square_feet",
    "bedrooms",
    "bathrooms",
    "year_built",
    "lot_size",
    "garage_spaces",
    "location_score",
)

TARGET_NAME = "actual_price"


def _as_finite_float(name: str, value) -> float:
    if isinstance(value, bool):
        raise ValueError(f"Field '{name}' must be numeric, got a boolean.")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Field '{name}' must be numeric, got {value!r}.") from None
    if not math.isfinite(number):
        raise ValueError(f"Field '{name}' must be finite, got {number}.")
    return number


@dataclass(frozen=True)
class HouseFeatures:
    """
    The seven numeric features describing a house.

    Field order matches `FEATURE_NAMES`.
    """

    square_feet: float
    bedrooms: float
    bathrooms: float
    year_built: float
    lot_size: float
    garage_spaces: float
    location_score: float

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, _as_finite_float(f.name, getattr(self, f.name)))

    def as_tuple(self) -> Tuple[float, ...]:
        """Return the feature values in `FEATURE_NAMES` order."""
        return tuple(getattr(self, name) for name in FEATURE_NAMES)

    def as_dict(self) -> dict:
        return {name: getattr(self, name) for name in FEATURE_NAMES}

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "HouseFeatures":
        """
        Build features from a mapping such as a CSV row or form payload.

        Extra keys are ignored.

        Raises:
            KeyError: If any of the seven features is missing
            ValueError: If a value is not a finite number
        """
        missing = [name for name in FEATURE_NAMES if name not in mapping]
        if missing:
            raise KeyError(f"Missing required feature(s): {', '.join(missing)}")
        return cls(**{name: mapping[name] for name in FEATURE_NAMES})


@dataclass(frozen=True)
class HouseSample:
    """A training sample: house features and the observed sale price."""

    features: HouseFeatures
    actual_price: float

    def __post_init__(self):
        object.__setattr__(
            self, "actual_price", _as_finite_float(TARGET_NAME, self.actual_price)
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "HouseSample":
        if TARGET_NAME not in mapping:
            raise KeyError(f"Missing required field: {TARGET_NAME}")
        return cls(HouseFeatures.from_mapping(mapping), mapping[TARGET_NAME])


@dataclass(frozen=True)
class PredictionRecord:
    """A prediction made for one set of features."""

    features: HouseFeatures
    predicted_price: float

    def as_dict(self) -> dict:
        record = self.features.as_dict()
        record["predicted_price"] = self.predicted_price
        return record
