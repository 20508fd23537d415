import os, sys, argparse

from har_tidy.download_data import fetch_dataset, DATASET_URL, DATASET_DIRNAME
from har_tidy.utils.tidy import build_tidy_set, write_tidy_set
from har_tidy.utils.report import plot_activity_means, DEFAULT_PLOT_COLUMN

def resolve_data_root(args):
    if args.data_root:
        return args.data_root
    if args.download:
        return fetch_dataset(args.data_dir, url=args.url)
    return os.path.join(args.data_dir, DATASET_DIRNAME)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Per-subject/per-activity means of the UCI HAR mean()/std() features")
    ap.add_argument("--data-dir", default="getcleandata",
                    help="Where the archive is downloaded and extracted")
    ap.add_argument("--data-root", default=None,
                    help="Path to an extracted 'UCI HAR Dataset' folder (skips download)")
    ap.add_argument("--download", action=argparse.BooleanOptionalAction, default=True)
    ap.add_argument("--url", default=DATASET_URL)
    ap.add_argument("--out", default="tidySet.txt")
    ap.add_argument("--plot", default=None, help="Optional PNG path for a per-activity bar chart")
    ap.add_argument("--plot-column", default=DEFAULT_PLOT_COLUMN)
    args = ap.parse_args(argv)

    data_root = resolve_data_root(args)
    print(f"=== Tidy summary of {data_root} ===")
    tidy = build_tidy_set(data_root)

    write_tidy_set(tidy, args.out)
    print(f"Saved tidy set to {args.out}")

    if args.plot:
        plot_activity_means(tidy, args.plot_column, args.plot)
    return 0

if __name__ == "__main__":
    sys.exit(main())
