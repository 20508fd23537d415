import os
import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from har_tidy.utils.data import UCI_LABELS

DEFAULT_PLOT_COLUMN = "timeBodyAccelerometerMagnitude-mean()"

def plot_activity_means(tidy: pd.DataFrame, column: str = DEFAULT_PLOT_COLUMN, out_path: str = "activity_means.png") -> str:
    """
    Bar chart of one measurement averaged over subjects, per activity.
    Error bars show the spread (std) across subjects.
    """
    if column not in tidy.columns:
        raise ValueError(f"Column '{column}' not found in tidy set")

    per_activity = tidy.groupby("activityID")[column].agg(["mean", "std"]).sort_index()
    names = [UCI_LABELS.get(int(i), str(i)) for i in per_activity.index]
    x = np.arange(len(per_activity))

    plt.figure(figsize=(10, 5))
    plt.bar(x, per_activity["mean"], yerr=per_activity["std"].fillna(0.0), color="gray", capsize=4)
    plt.xticks(x, names, rotation=30, ha="right")
    plt.ylabel(column)
    plt.title(f"Per-activity mean of {column}")
    plt.grid(True, axis="y")
    plt.tight_layout()

    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    plt.savefig(out_path)
    plt.close()
    print(f"Saved plot to {out_path}")
    return out_path
