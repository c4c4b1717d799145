import json
import os

from csv_splitter import resolve_options

DEFAULT_OUTPUT_FOLDER = "extracted"

script_dir = os.path.dirname(os.path.abspath(__file__))
config_path = os.path.join(script_dir, "config.json")

# Config keys mapped to SplitOptions fields

CONFIG_KEYS = {
    "LINES_PER_FILE": "rows_per_chunk",
    "FILE_NAME_PATTERN": "name_template",
}

def load_config(path=config_path):
    """Read the JSON settings file; a missing file means an empty config."""
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        try:
            config = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error decoding config file '{path}': {e}")
    if not isinstance(config, dict):
        raise ValueError(f"Config file '{path}' must contain a JSON object")
    return config

def load_split_options(path=config_path, **overrides):
    config = load_config(path)
    options = {field: config[key] for key, field in CONFIG_KEYS.items() if key in config}
    options.update({k: v for k, v in overrides.items() if v is not None})
    return resolve_options(options)

def get_output_folder(config=None, folder_name=None):
    """Resolve and create the output folder next to the scripts."""
    if folder_name is None:
        folder_name = (config or {}).get("OUTPUT_FOLDER", DEFAULT_OUTPUT_FOLDER)
    if os.path.isabs(folder_name):
        output_folder = folder_name
    else:
        output_folder = os.path.join(script_dir, folder_name)
    os.makedirs(output_folder, exist_ok=True)
    return output_folder
