import os, sys, argparse, zipfile, requests

DATASET_URL = "https://d396qusza40orc.cloudfront.net/getdata%2Fprojectfiles%2FUCI%20HAR%20Dataset.zip"
DATASET_DIRNAME = "UCI HAR Dataset"
ZIP_NAME = "projectdataset.zip"

def download_zip(url, out_zip, timeout=120):
    print(f"Downloading UCI-HAR from:\n  {url}")
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    with open(out_zip, "wb") as f:
        f.write(r.content)
    print("Download complete.")
    return out_zip

def extract_zip(zip_path, data_dir):
    print(f"Extracting {zip_path} into {data_dir} ...")
    with zipfile.ZipFile(zip_path, "r") as zf:
        zf.extractall(data_dir)
    return data_dir

def fetch_dataset(data_dir, url=DATASET_URL, force=False, timeout=120):
    """Downloads and unpacks the archive unless already present; returns the dataset root."""
    os.makedirs(data_dir, exist_ok=True)
    out_zip = os.path.join(data_dir, ZIP_NAME)
    data_root = os.path.join(data_dir, DATASET_DIRNAME)

    if force or not os.path.exists(out_zip):
        download_zip(url, out_zip, timeout=timeout)
    else:
        print(f"Zip already exists at {out_zip}, skipping download.")

    if force or not os.path.isdir(data_root):
        extract_zip(out_zip, data_dir)
    else:
        print(f"{data_root} already exists, skipping extraction.")

    if not os.path.isdir(data_root):
        raise FileNotFoundError(f"Expected dataset at {data_root}, but it was not found after extraction.")
    return data_root

def main(argv=None):
    ap = argparse.ArgumentParser(description="Download and unpack the UCI HAR dataset")
    ap.add_argument("--data-dir", default="getcleandata")
    ap.add_argument("--url", default=DATASET_URL)
    ap.add_argument("--force", action="store_true", help="Re-download and re-extract even if present")
    ap.add_argument("--timeout", type=float, default=120)
    args = ap.parse_args(argv)

    data_root = fetch_dataset(args.data_dir, url=args.url, force=args.force, timeout=args.timeout)
    print(f"Done. Dataset at: {data_root}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
