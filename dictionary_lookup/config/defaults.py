"""Default configuration values for Dictionary Lookup."""

import os
from collections.abc import Mapping

from .config import API_KEY_ENV_VAR, DictionaryConfig


def create_default_config(**overrides) -> DictionaryConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        DictionaryConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            api_key="secret",
            request_timeout=5.0
        )
    """
    return DictionaryConfig(**overrides)


def load_config_from_env(environ: Mapping[str, str] | None = None, **overrides) -> DictionaryConfig:
    """Create a configuration whose API key is read from the environment.

    The key is read once, at startup, and treated as an opaque credential.

    Args:
        environ: Mapping to read from (defaults to os.environ)
        **overrides: Keyword arguments to override default values

    Returns:
        DictionaryConfig carrying the API key from DICTIONARY_API_KEY
    """
    if environ is None:
        environ = os.environ

    overrides.setdefault("api_key", environ.get(API_KEY_ENV_VAR, "").strip())
    return create_default_config(**overrides)
