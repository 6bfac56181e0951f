"""
Host-side holder for the current house price model.

The regression engine itself is stateless. `PricingService` keeps the most
recently published `FittedModel` and swaps it only after a training run has
succeeded, so a failed run never disturbs predictions from the previous model.
"""

import threading
from typing import Callable, Optional, Sequence

from .data.records import HouseFeatures, HouseSample, PredictionRecord
from .models.linear import FittedModel, predict, train_model

NO_DATA = "no_data"
READY = "ready"
FAILED = "failed"


class ModelNotReadyError(RuntimeError):
    """No model has been published yet."""


class PricingService:
    """
    Train, publish and serve house price models.

    Attributes:
        supplier: Callable returning the complete training set
        last_error: Error from the most recent failed training run, or None
    """

    def __init__(self, supplier: Callable[[], Sequence[HouseSample]], verbose: bool = False):
        self.supplier = supplier
        self.verbose = verbose
        self.last_error: Optional[Exception] = None
        self._model: Optional[FittedModel] = None
        self._lock = threading.Lock()

    @property
    def model(self) -> Optional[FittedModel]:
        return self._model

    @property
    def status(self) -> str:
        """
        One of `"no_data"`, `"ready"` or `"failed"`.

        `"failed"` is reported whenever the most recent training run failed,
        even if an older model is still being served.
        """
        if self.last_error is not None:
            return FAILED
        if self._model is None:
            return NO_DATA
        return READY

    def retrain(self) -> Optional[FittedModel]:
        """
        Fetch the training set and train a new model.

        An empty training set leaves the service unchanged and returns None.

        Returns:
            model: The newly published model, or None if there was no data

        Raises:
            MatrixError: If training failed (e.g. singular data)
            Exception: Anything raised by the supplier (e.g. `ValueError`
                for invalid records, `OSError` for an unreadable file)

            In every failure case the previously published model is kept
            and `status` becomes `"failed"`.
        """
        try:
            samples = self.supplier()
            if len(samples) == 0:
                if self.verbose:
                    print("No training data available")
                return None
            model = train_model(samples, verbose=self.verbose)
        except Exception as e:
            with self._lock:
                self.last_error = e
            if self.verbose:
                print(f"Training failed: {e}")
            raise

        with self._lock:
            self._model = model
            self.last_error = None
        return model

    def predict(self, features: HouseFeatures) -> PredictionRecord:
        """
        Predict a price with the current model.

        Raises:
            ModelNotReadyError: If no model has been published
        """
        model = self._model
        if model is None:
            raise ModelNotReadyError("No model has been trained yet. Call retrain() first.")
        return PredictionRecord(features=features, predicted_price=predict(model, features))
