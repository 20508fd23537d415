import os
import pandas as pd
from typing import Tuple, List, Optional
from dataclasses import dataclass

# Activity labels from dataset
UCI_LABELS = {
    1: "WALKING",
    2: "WALKING_UPSTAIRS",
    3: "WALKING_DOWNSTAIRS",
    4: "SITTING",
    5: "STANDING",
    6: "LAYING",
}

SPLITS = ("train", "test")

def _read_txt_table(path: str) -> pd.DataFrame:
    return pd.read_csv(path, sep=r"\s+", header=None)

def load_feature_names(data_root: str) -> List[str]:
    """Feature names from features.txt, in file order (duplicates kept)."""
    features = _read_txt_table(os.path.join(data_root, "features.txt"))
    return features[1].astype(str).tolist()

def load_activity_labels(data_root: str) -> pd.DataFrame:
    labels = _read_txt_table(os.path.join(data_root, "activity_labels.txt"))
    labels.columns = ["activityID", "activityType"]
    return labels

@dataclass
class FeatureSplit:
    X: pd.DataFrame
    y: pd.DataFrame
    subjects: pd.DataFrame

def load_split(data_root: str, split: str, feature_names: Optional[List[str]] = None) -> FeatureSplit:
    """Loads one partition (X_<split>, y_<split>, subject_<split>) with named columns."""
    if split not in SPLITS:
        raise ValueError(f"Unknown split '{split}', expected one of {SPLITS}")
    if feature_names is None:
        feature_names = load_feature_names(data_root)
    split_dir = os.path.join(data_root, split)

    X = _read_txt_table(os.path.join(split_dir, f"X_{split}.txt"))
    y = _read_txt_table(os.path.join(split_dir, f"y_{split}.txt"))
    subjects = _read_txt_table(os.path.join(split_dir, f"subject_{split}.txt"))

    X.columns = feature_names
    y.columns = ["activityID"]
    subjects.columns = ["subjectID"]
    return FeatureSplit(X, y, subjects)

def load_feature_splits(data_root: str) -> Tuple[FeatureSplit, FeatureSplit]:
    """Loads engineered features for both partitions, sharing one feature list."""
    feature_names = load_feature_names(data_root)
    train = load_split(data_root, "train", feature_names)
    test = load_split(data_root, "test", feature_names)
    return train, test
