import json
import os
from datetime import datetime

DEFAULT_CONFIG = {
    "log_runs": False,
    "output_directory": "logs/",
    "log_file_prefix": "tm_runs_",
    "show_transition_table": True,
}

# Expected types for validation
CONFIG_SCHEMA = {
    "log_runs": bool,
    "output_directory": str,
    "log_file_prefix": str,
    "show_transition_table": bool,
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    unknown = sorted(set(config) - set(CONFIG_SCHEMA))
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

def load_config(path=None, verbose=False):
    config = DEFAULT_CONFIG.copy()

    if path is not None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file not found at: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        # Merge defaults with overrides
        config.update(user_config)

    validate_config(config)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config
