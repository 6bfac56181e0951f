"""Regression methods for model fitting."""

import numpy as np

from .matrix import Matrix, inverse, multiply, transpose


class LinearRegression():
    """
    Ordinary Least Squares (OLS) linear regression.

    Fits a linear model by minimizing the squared residuals:
        minimize ||y - Xθ||²

    The solution is obtained via the normal equations:
        θ = (X^T X)^{-1} X^T y

    with (X^T X)^{-1} computed by Gauss-Jordan elimination
    (see `house_pricing.matrix.inverse`). The design matrix is used as
    given, so include a column of ones to fit an intercept.

    Attributes:
        params: Fitted parameters as a Matrix of shape (n_features, 1)

    Example:
        >>> regressor = LinearRegression()
        >>> regressor.fit(X_train, y_train)
        >>> predictions = regressor.predict(X_test)
        >>> coefficients = regressor.get_params()
    """

    def __init__(self):
        """Initialize the linear regression model."""
        self.params = None

    def fit(self, X: Matrix, y: Matrix) -> "LinearRegression":
        """
        Fit the linear regression model using ordinary least squares.

        Args:
            X: Design matrix of shape (n_samples, n_features)
            y: Target vector of shape (n_samples, 1)

        Returns:
            self: The fitted model

        Raises:
            DimensionMismatchError: If X and y have different numbers of rows
            SingularMatrixError: If X^T X cannot be inverted
        """
        Xt = transpose(X)
        XtX_inv = inverse(multiply(Xt, X))
        Xty = multiply(Xt, y)
        self.params = multiply(XtX_inv, Xty)
        return self

    def predict(self, X: Matrix) -> np.ndarray:
        """
        Generate predictions using the fitted model.

        Args:
            X: Design matrix of shape (n_samples, n_features)

        Returns:
            predictions: Predicted values of shape (n_samples,)
        """
        if self.params is None:
            raise ValueError("Model must be fitted before calling predict(). Call fit() first.")
        return multiply(X, self.params).to_numpy()[:, 0]

    def get_params(self) -> np.ndarray:
        """
        Get the fitted parameters.

        Returns:
            params: Coefficient array of shape (n_features,)
        """
        if self.params is None:
            raise ValueError("Model must be fitted before calling get_params(). Call fit() first.")
        return self.params.to_numpy()[:, 0]
