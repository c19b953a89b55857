"""Configuration loader — merges YAML settings with .env overrides."""

import copy
import inspect
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from texttrimmer.errors import ConfigError
from texttrimmer.highlighter import DEFAULT_HIGHLIGHT_END, DEFAULT_HIGHLIGHT_START, highlight
from texttrimmer.trimmer import DEFAULT_ELLIPSIS, trim


DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"

DEFAULT_CONFIG = {
    "trim": {
        "max_length": None,
        "max_words": None,
        "ellipsis": DEFAULT_ELLIPSIS,
        "respect_word_boundaries": True,
        "strip_html": False,
    },
    "highlight": {
        "highlight_start": DEFAULT_HIGHLIGHT_START,
        "highlight_end": DEFAULT_HIGHLIGHT_END,
        "case_sensitive": False,
        "whole_words": False,
    },
    "logging": {
        "level": "INFO",
        "file": None,
        "package_level": None,
    },
}

# (env var, section, key)
ENV_OVERRIDES = [
    ("TEXTTRIMMER_ELLIPSIS", "trim", "ellipsis"),
    ("TEXTTRIMMER_HIGHLIGHT_START", "highlight", "highlight_start"),
    ("TEXTTRIMMER_HIGHLIGHT_END", "highlight", "highlight_end"),
    ("TEXTTRIMMER_LOG_LEVEL", "logging", "level"),
]


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base."""
    merged = base.copy()
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_dir: str | Path | None = None) -> dict:
    """Load configuration from config.yaml and environment variables.

    Returns the built-in defaults merged with the YAML file, with
    TEXTTRIMMER_* environment variables applied last.
    """
    config_dir = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR

    # Load .env from config dir or project root, without clobbering
    # variables already set in the environment
    for env_path in [config_dir / ".env", config_dir.parent / ".env"]:
        if env_path.exists():
            load_dotenv(env_path)
            break

    config = copy.deepcopy(DEFAULT_CONFIG)

    config_path = config_dir / "config.yaml"
    if config_path.exists():
        try:
            with open(config_path, "r") as f:
                file_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse {config_path}: {e}") from e
        if not isinstance(file_config, dict):
            raise ConfigError(f"{config_path} must contain a mapping, got {type(file_config).__name__}")
        config = _deep_merge(config, file_config)

    for env_var, section, key in ENV_OVERRIDES:
        value = os.getenv(env_var)
        # Empty markers are valid; an empty log level is not
        if value is None or (value == "" and section == "logging"):
            continue
        config.setdefault(section, {})
        config[section][key] = value

    return config


def _options_for(func, section: dict) -> dict:
    accepted = set(inspect.signature(func).parameters) - {"text", "terms"}
    return {key: value for key, value in section.items() if key in accepted}


def trim_options(config: dict) -> dict:
    """Keyword arguments for trim() taken from the config's trim section."""
    return _options_for(trim, config.get("trim") or {})


def highlight_options(config: dict) -> dict:
    """Keyword arguments for highlight() taken from the config's highlight section."""
    return _options_for(highlight, config.get("highlight") or {})
