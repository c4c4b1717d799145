import os
import sys

from csv_splitter import SplitError, split_csv_file
from split_config import get_output_folder, load_config, load_split_options

# Prompt helpers

def prompt_csv_path():
    csv_file = input("Drop the path to a .csv file: ").strip().strip('"').strip("'")
    if not csv_file:
        print("No file path provided. Exiting.\n")
        sys.exit(1)

    if not os.path.isabs(csv_file):
        csv_file = os.path.abspath(os.path.join(os.getcwd(), csv_file))

    if not os.path.isfile(csv_file):
        print(f"File does not exist: {csv_file}\n")
        sys.exit(1)

    if not csv_file.lower().endswith('.csv'):
        print(f"The file is not a CSV: {csv_file}\n")
        sys.exit(1)

    return csv_file

def prompt_rows_per_split(default):
    answer = input(f"Please enter number of items per split [{default}]: ").strip()
    if not answer:
        return default
    try:
        rows = int(answer)
    except ValueError:
        rows = 0
    if rows < 1:
        print(f"Invalid number of items: {answer}\n")
        sys.exit(1)
    return rows

# ---- Main ----

def main():
    try:
        config = load_config()
        options = load_split_options()
    except ValueError as e:
        print(f"{e}\n")
        sys.exit(1)

    csv_file = prompt_csv_path()
    rows_per_split = prompt_rows_per_split(options.rows_per_chunk)
    output_folder = get_output_folder(config)

    try:
        result = split_csv_file(csv_file, output_folder, {
            "rows_per_chunk": rows_per_split,
            "name_template": options.name_template,
        })
    except SplitError as e:
        print(f"Failed to split {os.path.basename(csv_file)}: {e}\n")
        sys.exit(1)

    print(f"-----------")
    if result.files_written == 0:
        print(f"No data rows found in {os.path.basename(csv_file)}. Nothing was written.\n")
    else:
        print(f"CSV was split into {result.files_written} parts. Files located inside folder: '{output_folder}'\n")

if __name__ == "__main__":
    main()
