"""Configuration management for Dictionary Lookup."""

from .config import API_KEY_ENV_VAR, DictionaryConfig
from .defaults import create_default_config, load_config_from_env

__all__ = ["API_KEY_ENV_VAR", "DictionaryConfig", "create_default_config", "load_config_from_env"]
