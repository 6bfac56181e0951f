"""Multiple linear regression model for house prices."""

import math
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from ..data.records import FEATURE_NAMES, HouseFeatures, HouseSample
from ..evaluation import r2_score
from ..features import design_matrix, target_vector
from ..regressors import LinearRegression


@dataclass(frozen=True)
class FittedModel:
    """
    Result of one training run. Never mutated after creation.

    Attributes:
        coefficients: One coefficient per feature, aligned with `feature_names`
        intercept: Constant term
        r_squared: In-sample coefficient of determination. Can be negative.
            `nan` when every training price is identical (R² is undefined).
        feature_names: `FEATURE_NAMES`
    """

    coefficients: Tuple[float, ...]
    intercept: float
    r_squared: float
    feature_names: Tuple[str, ...] = FEATURE_NAMES

    def __post_init__(self):
        object.__setattr__(self, "coefficients", tuple(float(c) for c in self.coefficients))
        object.__setattr__(self, "intercept", float(self.intercept))
        object.__setattr__(self, "r_squared", float(self.r_squared))
        object.__setattr__(self, "feature_names", tuple(self.feature_names))
        # predict() pairs coefficients with features in FEATURE_NAMES order
        if self.feature_names != FEATURE_NAMES:
            raise ValueError(
                f"feature_names must be {FEATURE_NAMES}, got {self.feature_names}."
            )
        if len(self.coefficients) != len(self.feature_names):
            raise ValueError(
                f"Got {len(self.coefficients)} coefficients for "
                f"{len(self.feature_names)} features."
            )

    @property
    def has_defined_r_squared(self) -> bool:
        return not math.isnan(self.r_squared)

    def coefficient_for(self, name: str) -> float:
        """Return the coefficient of a named feature."""
        try:
            return self.coefficients[self.feature_names.index(name)]
        except ValueError:
            raise KeyError(f"Unknown feature: {name}") from None

    def as_dict(self) -> Dict:
        return {
            "coefficients": dict(zip(self.feature_names, self.coefficients)),
            "intercept": self.intercept,
            "r_squared": self.r_squared,
        }

    def summary(self) -> str:
        """Render the model statistics as text."""
        if self.has_defined_r_squared:
            r2_text = f"{self.r_squared * 100:.2f}%"
        else:
            r2_text = "undefined (all training prices identical)"

        width = max(len(name) for name in self.feature_names)
        lines = ["Model Statistics", f"R² Score: {r2_text}", "Feature Coefficients:"]
        for name, coef in zip(self.feature_names, self.coefficients):
            label = name.replace("_", " ")
            lines.append(f"  {label:<{width}}  {coef:.4f}")
        lines.append(f"  {'intercept':<{width}}  {self.intercept:.2f}")
        return "\n".join(lines)


def train_model(samples: Sequence[HouseSample], verbose: bool = False) -> FittedModel:
    """
    Fit an ordinary least squares model to a training set.

    Args:
        samples: Training samples. More than 8 linearly independent samples
            are needed, otherwise X^T X is singular.
        verbose: If True, print progress messages

    Returns:
        model: `FittedModel`

    Raises:
        SingularMatrixError: If the features are collinear or there are too
            few samples. Nothing is returned in that case.
    """
    if verbose:
        print(f"Training on {len(samples)} samples...")

    X = design_matrix(samples)
    y = target_vector(samples)

    regressor = LinearRegression().fit(X, y)
    beta = regressor.get_params()

    fitted = regressor.predict(X)
    r_squared = r2_score(y.to_numpy()[:, 0], fitted)

    model = FittedModel(
        coefficients=tuple(beta[1:]),
        intercept=float(beta[0]),
        r_squared=r_squared,
    )

    if verbose:
        print(f"  Intercept: {model.intercept:.2f}")
        print(f"  R²: {model.r_squared:.4f}")

    return model


def predict(model: FittedModel, features: HouseFeatures) -> float:
    """
    Predict a house price.

    price = intercept + sum(coefficients[k] * features[k]), floored at 0.

    Args:
        model: Fitted model
        features: House features

    Returns:
        price: Predicted price (>= 0)
    """
    price = model.intercept
    for coef, value in zip(model.coefficients, features.as_tuple()):
        price += coef * value
    return max(0.0, price)
