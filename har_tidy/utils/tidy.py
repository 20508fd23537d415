"""
Tidy-data pipeline over the UCI HAR engineered features.

  load splits -> combine per split -> merge train/test -> keep mean()/std()
  -> attach activity names -> descriptive column names -> per subject/activity means
"""
import os
import re
import csv
import pandas as pd
from typing import List, Tuple

from har_tidy.utils.data import FeatureSplit, load_feature_splits, load_activity_labels

ID_COLUMNS = ("subjectID", "activityID")
LABEL_COLUMN = "activityType"
GROUP_COLUMNS = ["subjectID", "activityID", LABEL_COLUMN]

MEAN_STD_PATTERN = r"activityID|subjectID|mean\(\)|std\(\)"

# Applied in order. Lookaheads keep a second pass from re-expanding names.
RENAMES: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"^t(?=[A-Z])"), "time"),
    (re.compile(r"^f(?=[A-Z])"), "frequency"),
    (re.compile(r"Acc(?!elerometer)"), "Accelerometer"),
    (re.compile(r"Gyro(?!scope)"), "Gyroscope"),
    (re.compile(r"Mag(?!nitude)"), "Magnitude"),
    (re.compile(r"(?:Body){2,}"), "Body"),
]

def combine_split(split: FeatureSplit) -> pd.DataFrame:
    """activityID, subjectID, then the 561 measurements."""
    return pd.concat([split.y, split.subjects, split.X], axis=1)

def merge_splits(train: FeatureSplit, test: FeatureSplit) -> pd.DataFrame:
    return pd.concat([combine_split(train), combine_split(test)], axis=0, ignore_index=True)

def select_mean_std(df: pd.DataFrame) -> pd.DataFrame:
    """Keeps the identifier columns and every column named with mean() or std()."""
    keep = df.columns.astype(str).str.contains(MEAN_STD_PATTERN, regex=True)
    return df.loc[:, keep]

def attach_activity_names(df: pd.DataFrame, labels: pd.DataFrame) -> pd.DataFrame:
    return df.merge(labels, on="activityID", how="left")

def descriptive_name(name: str) -> str:
    for pattern, repl in RENAMES:
        name = pattern.sub(repl, name)
    return name

def rename_columns(df: pd.DataFrame) -> pd.DataFrame:
    return df.rename(columns=descriptive_name)

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """
    Mean of every measurement per (subjectID, activityID).
    Rows whose activityType did not resolve still get their own group.
    """
    grouped = df.groupby(GROUP_COLUMNS, as_index=False, sort=True, dropna=False)
    return grouped.mean()

def build_tidy_set(data_root: str, verbose: bool = True) -> pd.DataFrame:
    train, test = load_feature_splits(data_root)
    labels = load_activity_labels(data_root)

    merged = merge_splits(train, test)
    selected = select_mean_std(merged)
    labeled = attach_activity_names(selected, labels)
    named = rename_columns(labeled)
    tidy = summarize(named)

    if verbose:
        print(f"Merged: {merged.shape[0]} rows x {merged.shape[1]} columns "
              f"(train={len(train.y)}, test={len(test.y)})")
        print(f"Mean/std selection: {selected.shape[0]} rows x {selected.shape[1]} columns "
              f"({selected.shape[1] - len(ID_COLUMNS)} measurements)")
        print(f"Activity names: {labeled.shape[0]} rows x {labeled.shape[1]} columns "
              f"({labeled[LABEL_COLUMN].isna().sum()} unmatched)")
        print(f"Tidy set: {tidy.shape[0]} subject/activity rows x {tidy.shape[1]} columns")
    return tidy

def write_tidy_set(df: pd.DataFrame, path: str) -> str:
    """Space-separated, quoted header and strings, no row names."""
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    df.to_csv(path, sep=" ", index=False, quoting=csv.QUOTE_NONNUMERIC, na_rep="NA")
    return path

def read_tidy_set(path: str) -> pd.DataFrame:
    return pd.read_csv(path, sep=" ")
