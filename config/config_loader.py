import json
import os
from datetime import datetime

from simulator.rules import DUPLICATE_POLICIES

DEFAULT_CONFIG_PATH = "config/runtime_config.json"

DEFAULT_CONFIG = {
    "rules_file": "transfer_rules.txt",
    "blank_symbol": "E",
    "duplicate_rules": "first",
    "max_steps": 0,
    "verify_count": 200,
    "check_results": True,
    "print_tapes": False,
    "output_directory": "logs/",
    "log_file_prefix": "polytm_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "rules_file": str,
    "blank_symbol": str,
    "duplicate_rules": str,
    "max_steps": int,
    "verify_count": int,
    "check_results": bool,
    "print_tapes": bool,
    "output_directory": str,
    "log_file_prefix": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    if len(config["blank_symbol"]) != 1:
        raise ValueError("blank_symbol must be exactly one character.")
    if config["blank_symbol"] in ("0", "1"):
        raise ValueError("blank_symbol cannot be 0 or 1, those carry the unary encoding.")
    if config["duplicate_rules"] not in DUPLICATE_POLICIES:
        raise ValueError(f"duplicate_rules must be one of {DUPLICATE_POLICIES}.")
    if config["max_steps"] < 0 or config["verify_count"] < 0:
        raise ValueError("max_steps and verify_count must be non-negative.")

def load_config(path=DEFAULT_CONFIG_PATH, verbose=True):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    validate_config(config)

    os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config
