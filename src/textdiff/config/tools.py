import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

# Store for tools configuration
TOOLS = [
    {
        "id": "text-diff",
        "name": "Text Diff Tool",
        "description": "Compare two texts line by line, word by word or character by character with similarity scoring",
        "api": "/api/text-diff/compare",
        "tags": ["diff", "compare", "text", "files", "unified", "side-by-side"],
        "modes": ["line", "word", "character"],
        "icon": "⚖️"
    },
]

DEFAULT_TEXT_DIFF_SETTINGS = {
    "max_input_length": 10000,
    "default_mode": "line",
    "original_name": "original",
    "modified_name": "modified",
}


def get_config_directory() -> Path:
    """Get the config directory path."""
    config_dir = os.environ.get('TEXTDIFF_CONFIG_DIR')
    if config_dir:
        return Path(config_dir)

    # Default to ~/.config/textdiff
    home_dir = Path.home()
    return home_dir / '.config' / 'textdiff'


def load_config() -> Dict[str, Any]:
    """Load configuration from config.json in the config directory"""
    config_file = get_config_directory() / "config.json"
    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = json.load(f)
            if isinstance(config, dict):
                return config
            logger.warning("Ignoring %s: top level is not an object", config_file)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Ignoring unreadable config %s: %s", config_file, e)
    return {}


def get_text_diff_settings(config: Dict[str, Any] = None) -> Dict[str, Any]:
    """Text diff settings from the config file, filled in with defaults."""
    if config is None:
        config = load_config()

    settings = dict(DEFAULT_TEXT_DIFF_SETTINGS)
    overrides = config.get('text_diff', {})
    if isinstance(overrides, dict):
        settings.update({k: v for k, v in overrides.items() if k in settings})
    return settings


def is_tool_enabled(tool_id: str, config: Dict[str, Any] = None) -> bool:
    """Check if a tool is enabled in config. Defaults to True if not specified."""
    if config is None:
        config = load_config()
    tool_conf = config.get('tools', {}).get(tool_id, {})
    return tool_conf.get('enabled', True)


def get_enabled_tools(config: Dict[str, Any] = None) -> List[Dict[str, Any]]:
    """Filter tools list to only include enabled tools."""
    if config is None:
        config = load_config()
    return [tool for tool in TOOLS if is_tool_enabled(tool.get('id', ''), config)]
