import argparse
import os
import sys

from tqdm import tqdm

from csv_splitter import SplitError, split_csv_file
from split_config import config_path, load_split_options

DEFAULT_OUTPUT_SUBDIR = "outs"

# Discovery

def find_csv_files(input_dir):
    """Return the regular *.csv files directly inside input_dir, sorted by name."""
    csv_files = []
    for file in sorted(os.listdir(input_dir)):
        file_path = os.path.join(input_dir, file)
        if os.path.isdir(file_path):
            continue
        if file.lower().endswith(".csv"):
            csv_files.append(file_path)
    return csv_files

# Core logic

def split_folder(input_dir, output_dir, options=None):
    """
    Split every CSV file in input_dir into output_dir, one file at a time.

    A failure on one file is reported and the remaining files are still
    processed. Returns (results, failures) keyed by source path.
    """
    os.makedirs(output_dir, exist_ok=True)

    csv_files = find_csv_files(input_dir)
    results = {}
    failures = {}

    if not csv_files:
        print(f"No CSV files found in {input_dir}")
        return results, failures

    print(f"Found {len(csv_files)} CSV file(s) to split.")

    for file_path in tqdm(csv_files, desc="Splitting", unit="file"):
        tqdm.write(f"Splitting file: {os.path.basename(file_path)}")
        try:
            results[file_path] = split_csv_file(file_path, output_dir, options)
        except SplitError as e:
            tqdm.write(f"Failed to split {os.path.basename(file_path)}: {e}")
            failures[file_path] = e

    return results, failures

def build_parser():
    parser = argparse.ArgumentParser(
        prog="csv-split",
        description="Split large CSV files into smaller, more manageable chunks",
    )
    parser.add_argument("directory", nargs="?", help="Directory containing CSV files to split")
    parser.add_argument("-l", "--lines", type=int, help="Number of lines per output file")
    parser.add_argument("-o", "--output", help="Custom output directory (default: <input>/outs)")
    parser.add_argument("-p", "--pattern", help="Output filename pattern (default: {name}_{num}.csv)")
    parser.add_argument("-c", "--config", default=config_path, help="Path to a JSON settings file")
    return parser

# ---- Main ----

def main(argv=None):
    args = build_parser().parse_args(argv)

    input_dir = args.directory
    if not input_dir:
        input_dir = input("Drop the path to a folder with .csv files: ").strip().strip('"').strip("'")
    if not input_dir:
        print("No folder path provided. Exiting.\n")
        return 1

    if not os.path.isdir(input_dir):
        print(f"The input directory '{input_dir}' does not exist or is not a directory.\n")
        return 1

    try:
        options = load_split_options(args.config, rows_per_chunk=args.lines, name_template=args.pattern)
    except ValueError as e:
        print(f"{e}\n")
        return 1

    output_dir = args.output or os.path.join(input_dir, DEFAULT_OUTPUT_SUBDIR)

    results, failures = split_folder(input_dir, output_dir, options)

    if results or failures:
        files_written = sum(result.files_written for result in results.values())
        print(f"-----------")
        print(f"All files have been processed. {len(results)} split, {len(failures)} failed, "
              f"{files_written} file(s) written inside folder: '{output_dir}'\n")

    return 1 if failures else 0

if __name__ == "__main__":
    sys.exit(main())
