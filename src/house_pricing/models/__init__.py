"""House price models."""

from .linear import FittedModel, predict, train_model

__all__ = ["FittedModel", "predict", "train_model"]
