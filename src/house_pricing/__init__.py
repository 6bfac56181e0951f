"""Multiple linear regression for house prices."""

from .data.records import FEATURE_NAMES, HouseFeatures, HouseSample, PredictionRecord
from .matrix import (
    DimensionMismatchError,
    Matrix,
    MatrixError,
    NotSquareError,
    SingularMatrixError,
)
from .models import FittedModel, predict, train_model
from .service import PricingService

__all__ = [
    "FEATURE_NAMES",
    "HouseFeatures",
    "HouseSample",
    "PredictionRecord",
    "Matrix",
    "MatrixError",
    "DimensionMismatchError",
    "NotSquareError",
    "SingularMatrixError",
    "FittedModel",
    "predict",
    "train_model",
    "PricingService",
]
