import copy
import json
import logging
import os

from sketchjam.config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

# We define the file name here
CONFIG_FILE = "config.json"


def load_config(config_path=None):
    if config_path is None:
        base_path = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_path, CONFIG_FILE)
    try:
        with open(config_path, 'r') as file:
            return json.load(file)

    except FileNotFoundError:
        logger.error("config file not found: %s", config_path)
        return None
    except json.JSONDecodeError as e:
        logger.error("JSON error in %s: %s", config_path, e)
        return None


def merge_with_defaults(loaded):
    """Overlay each loaded section on top of the built-in defaults"""
    merged = copy.deepcopy(DEFAULT_CONFIG)
    if not isinstance(loaded, dict):
        return merged
    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
        else:
            merged[section] = values
    return merged


CONFIG = merge_with_defaults(load_config())
