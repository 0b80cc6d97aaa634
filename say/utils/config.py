import json
import os
from pathlib import Path
from dotenv import load_dotenv

MAX_COLUMNS = 80

# Standard Linux path for user config: ~/.config/say/
SAY_HOME = Path.home() / ".config" / "say"
CONFIG_FILE = SAY_HOME / "config.json"
ENV_FILE = SAY_HOME / ".env"

DEFAULT_CONFIG = {
    "columns": MAX_COLUMNS,
    "justify": "left",
    "time_format": "web_service",
    "max_logs": 100
}

INT_KEYS = ("columns", "max_logs")

# Environment variable -> config key
ENV_OVERRIDES = {
    "SAY_COLUMNS": "columns",
    "SAY_JUSTIFY": "justify",
    "SAY_TIME_FORMAT": "time_format",
}

def ensure_home():
    """Ensure the config directory exists."""
    if not SAY_HOME.exists():
        SAY_HOME.mkdir(parents=True, exist_ok=True)

def load_config(config_file=None, env_file=None):
    """Defaults, overlaid by config.json, overlaid by SAY_* environment variables."""
    config_file = Path(config_file or CONFIG_FILE)
    config = dict(DEFAULT_CONFIG)
    if config_file.exists():
        try:
            with open(config_file, "r") as f:
                config.update(json.load(f))
        except (OSError, ValueError):
            config = dict(DEFAULT_CONFIG)
    config.update(get_env_overrides(env_file))
    for key in INT_KEYS:
        try:
            config[key] = int(config[key])
        except (TypeError, ValueError):
            config[key] = DEFAULT_CONFIG[key]
    return config

def save_config(config, config_file=None):
    config_file = Path(config_file or CONFIG_FILE)
    if config_file == CONFIG_FILE:
        ensure_home()
    with open(config_file, "w") as f:
        json.dump(config, f, indent=4)

def get_env_overrides(env_file=None):
    """Loads variables from the global ~/.config/say/.env file (without clobbering the real environment)."""
    env_file = Path(env_file or ENV_FILE)
    if env_file.exists():
        load_dotenv(env_file, override=False)
    return {key: os.environ[name] for name, key in ENV_OVERRIDES.items() if os.environ.get(name)}
