# src/photokml/config.py
import json
import logging
from pathlib import Path
from typing import Dict, Any

# Configure logger
logger = logging.getLogger(__name__)

# Config paths
CONFIG_DIR = Path.home() / ".photokml"
CONFIG_FILE = CONFIG_DIR / "settings.json"

DEFAULT_CONFIG = {
    "kml_file": "output.kml",
    "log_level": "info",
    "file_log_level": "debug",
    "log_file": "logs/photokml.log",
}


class ConfigManager:
    @staticmethod
    def load_config() -> Dict[str, Any]:
        """Loads the settings from the JSON file, or returns the defaults."""
        if not CONFIG_FILE.exists():
            return DEFAULT_CONFIG.copy()

        try:
            with open(CONFIG_FILE, "r", encoding="utf-8") as f:
                data = json.load(f)
            # Merge with defaults to handle new keys
            config = DEFAULT_CONFIG.copy()
            config.update({k: v for k, v in data.items() if k in DEFAULT_CONFIG})
            return config
        except (OSError, ValueError, AttributeError) as e:
            logger.warning(f"Could not load settings from {CONFIG_FILE}: {e}")
            return DEFAULT_CONFIG.copy()

    @staticmethod
    def save_config(**settings) -> bool:
        """Stores the given settings on top of the current ones. Unknown keys are ignored."""
        current = ConfigManager.load_config()
        for key, value in settings.items():
            if key in DEFAULT_CONFIG and value is not None:
                current[key] = str(value)

        try:
            CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
            with open(CONFIG_FILE, "w", encoding="utf-8") as f:
                json.dump(current, f, indent=4)
        except OSError as e:
            logger.warning(f"Error saving settings to {CONFIG_FILE}: {e}")
            return False
        return True
