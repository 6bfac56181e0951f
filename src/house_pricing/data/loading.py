"""
Data loading functions for house training data.

Training data is read from CSV files with one row per house. The file must
contain the seven feature columns and `actual_price`; any other columns
(e.g. `id`, `created_at`) are ignored.
"""

import pandas as pd
from typing import List, Sequence

from .records import FEATURE_NAMES, TARGET_NAME, HouseSample

REQUIRED_COLUMNS = list(FEATURE_NAMES) + [TARGET_NAME]


def samples_from_dataframe(df: pd.DataFrame) -> List[HouseSample]:
    """
    Convert a dataframe of houses into training samples, preserving row order.

    Args:
        df: `pandas.DataFrame` with the feature columns and `actual_price`

    Returns:
        List of `HouseSample`

    Raises:
        ValueError: If a required column is missing or contains missing values
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"DataFrame missing required column(s): {', '.join(missing)}")

    n_missing = df[REQUIRED_COLUMNS].isna().sum()
    n_missing = n_missing[n_missing > 0]
    if len(n_missing) > 0:
        details = ", ".join(f"{col} ({count})" for col, count in n_missing.items())
        raise ValueError(f"Found missing values in column(s): {details}")

    return [
        HouseSample.from_mapping(row)
        for row in df[REQUIRED_COLUMNS].to_dict(orient="records")
    ]


def samples_to_dataframe(samples: Sequence[HouseSample]) -> pd.DataFrame:
    """
    Convert training samples into a `pandas.DataFrame`.

    Columns are the seven features followed by `actual_price`.
    """
    records = []
    for sample in samples:
        record = sample.features.as_dict()
        record[TARGET_NAME] = sample.actual_price
        records.append(record)
    return pd.DataFrame(records, columns=REQUIRED_COLUMNS)


def load_training_data(file_path: str, verbose: bool = False) -> List[HouseSample]:
    """
    Load house training data from CSV.

    Args:
        file_path: Path to CSV file.
        verbose: Print progress messages. Default: False.

    Returns:
        List of `HouseSample` in file order
    """
    if verbose:
        print(f"Loading training data from {file_path}...")

    df = pd.read_csv(file_path)

    if verbose:
        print(f"  Loaded {len(df)} rows with {len(df.columns)} columns")

    samples = samples_from_dataframe(df)

    if verbose:
        print(f"  Built {len(samples)} training samples")

    return samples
