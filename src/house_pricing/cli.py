"""
Train a house price model from a CSV file and make predictions.

```bash
house-pricing train data/houses.csv --verbose
house-pricing predict data/houses.csv --square-feet 2000 --bedrooms 3 \
    --bathrooms 2 --year-built 1995 --lot-size 6000 --garage-spaces 2 \
    --location-score 7
```
"""

import argparse
import os
import sys

from .data.loading import load_training_data
from .data.records import FEATURE_NAMES, HouseFeatures
from .data.validation import validate_training_data
from .matrix import MatrixError, SingularMatrixError
from .models.linear import predict, train_model


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="house-pricing",
        description="Multiple linear regression model for house prices",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    train_parser = subparsers.add_parser(
        "train", help="Train a model and print its statistics"
    )
    train_parser.add_argument("data_path", type=str, help="Training data CSV file")
    train_parser.add_argument(
        "--validate",
        action="store_true",
        help="Check the training data before fitting",
    )
    train_parser.add_argument(
        "--verbose", action="store_true", help="Print progress messages"
    )

    predict_parser = subparsers.add_parser(
        "predict", help="Train a model and predict the price of one house"
    )
    predict_parser.add_argument("data_path", type=str, help="Training data CSV file")
    for name in FEATURE_NAMES:
        predict_parser.add_argument(
            "--" + name.replace("_", "-"),
            dest=name,
            type=float,
            required=True,
            help=f"Value of {name}",
        )
    predict_parser.add_argument(
        "--verbose", action="store_true", help="Print progress messages"
    )

    return parser


def run_train(args) -> int:
    samples = load_training_data(args.data_path, verbose=args.verbose)
    if len(samples) == 0:
        print(f"No training data found in {args.data_path}")
        return 1

    if args.validate:
        is_valid, _ = validate_training_data(samples, verbose=True)
        if not is_valid:
            return 1

    model = train_model(samples, verbose=args.verbose)
    print(model.summary())
    return 0


def run_predict(args) -> int:
    samples = load_training_data(args.data_path, verbose=args.verbose)
    if len(samples) == 0:
        print(f"No training data found in {args.data_path}")
        return 1

    model = train_model(samples, verbose=args.verbose)
    features = HouseFeatures(**{name: getattr(args, name) for name in FEATURE_NAMES})
    price = predict(model, features)
    print(f"Predicted price: {price:,.2f}")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not os.path.exists(args.data_path):
        print(f"Error: input file not found: {args.data_path}", file=sys.stderr)
        return 1

    try:
        if args.command == "train":
            return run_train(args)
        return run_predict(args)
    except SingularMatrixError as e:
        print(f"Error: cannot fit, insufficient or degenerate data ({e})", file=sys.stderr)
        return 1
    except (MatrixError, ValueError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
