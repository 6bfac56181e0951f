"""House records, loading and validation."""

from .records import (
    FEATURE_NAMES,
    TARGET_NAME,
    HouseFeatures,
    HouseSample,
    PredictionRecord,
)
from .loading import load_training_data, samples_from_dataframe, samples_to_dataframe
from .validation import validate_training_data

__all__ = [
    "FEATURE_NAMES",
    "TARGET_NAME",
    "HouseFeatures",
    "HouseSample",
    "PredictionRecord",
    "load_training_data",
    "samples_from_dataframe",
    "samples_to_dataframe",
    "validate_training_data",
]
