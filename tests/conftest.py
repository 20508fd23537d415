import io
import os
import zipfile
from pathlib import Path

import pytest

FEATURES = [
    "tBodyAcc-mean()-X",
    "tBodyAcc-std()-X",
    "tBodyGyro-mad()-X",
    "fBodyAcc-bandsEnergy()-1,8",
    "fBodyAcc-bandsEnergy()-1,8",
    "fBodyAcc-meanFreq()-X",
    "fBodyBodyGyroMag-mean()",
    "angle(X,gravityMean)",
]

LABELS = [
    (1, "WALKING"),
    (2, "WALKING_UPSTAIRS"),
    (3, "WALKING_DOWNSTAIRS"),
    (4, "SITTING"),
    (5, "STANDING"),
    (6, "LAYING"),
]

# (subjectID, activityID, measurements in FEATURES order)
TRAIN_ROWS = [
    (1, 1, [0.2, 0.1, 9.0, 9.0, 9.0, 9.0, -0.5, 9.0]),
    (1, 1, [0.4, 0.3, 9.0, 9.0, 9.0, 9.0, -0.7, 9.0]),
    (1, 2, [0.6, 0.5, 9.0, 9.0, 9.0, 9.0, 0.1, 9.0]),
    (3, 6, [-0.9, 0.05, 9.0, 9.0, 9.0, 9.0, 0.2, 9.0]),
]
TEST_ROWS = [
    (2, 4, [0.0, 0.2, 9.0, 9.0, 9.0, 9.0, 0.3, 9.0]),
    (2, 4, [1.0, 0.4, 9.0, 9.0, 9.0, 9.0, 0.5, 9.0]),
    (1, 1, [0.6, 0.5, 9.0, 9.0, 9.0, 9.0, -0.9, 9.0]),
]


def _write_split(root: Path, split: str, rows):
    split_dir = root / split
    split_dir.mkdir(parents=True, exist_ok=True)
    (split_dir / f"X_{split}.txt").write_text(
        "".join(" " + " ".join(f"{v:.7e}" for v in vals) + "\n" for _, _, vals in rows)
    )
    (split_dir / f"y_{split}.txt").write_text("".join(f"{a}\n" for _, a, _ in rows))
    (split_dir / f"subject_{split}.txt").write_text("".join(f"{s}\n" for s, _, _ in rows))


def write_har_tree(base: Path) -> Path:
    """Writes a miniature 'UCI HAR Dataset' folder under base and returns it."""
    root = base / "UCI HAR Dataset"
    root.mkdir(parents=True, exist_ok=True)
    (root / "features.txt").write_text(
        "".join(f"{i} {name}\n" for i, name in enumerate(FEATURES, start=1))
    )
    (root / "activity_labels.txt").write_text("".join(f"{i} {name}\n" for i, name in LABELS))
    _write_split(root, "train", TRAIN_ROWS)
    _write_split(root, "test", TEST_ROWS)
    return root


def har_zip_bytes(base: Path) -> bytes:
    root = write_har_tree(base)
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for path in sorted(root.rglob("*")):
            if path.is_file():
                zf.write(path, os.path.relpath(path, base))
    return buf.getvalue()


class FakeResponse:
    def __init__(self, content=b"", status_code=200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            import requests
            raise requests.HTTPError(f"{self.status_code} Client Error")


@pytest.fixture
def har_root(tmp_path):
    return str(write_har_tree(tmp_path / "data"))


@pytest.fixture
def fake_get(tmp_path, monkeypatch):
    """Serves a zipped miniature dataset instead of hitting the network."""
    payload = har_zip_bytes(tmp_path / "zip_src")
    calls = []

    def _get(url, timeout=None):
        calls.append(url)
        return FakeResponse(payload)

    monkeypatch.setattr("har_tidy.download_data.requests.get", _get)
    return calls
