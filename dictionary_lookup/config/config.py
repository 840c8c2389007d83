"""Configuration classes for Dictionary Lookup."""

from dataclasses import dataclass

from dictionary_lookup import __version__

API_KEY_ENV_VAR = "DICTIONARY_API_KEY"


@dataclass(frozen=True)
class DictionaryConfig:
    """Immutable configuration for dictionary lookups.

    All configuration is frozen (immutable) so a single instance can be
    shared by the UI thread and every background lookup worker.
    """

    # API settings
    api_key: str = ""
    api_host: str = "www.dictionaryapi.com"
    base_path: str = "/api/v3/references/collegiate/json"
    request_timeout: float = 10.0  # Seconds for connect and for each read
    user_agent: str = f"Dictionary/{__version__}"

    # Request coordination
    reject_while_in_flight: bool = False  # False = a new search supersedes the running one

    # Window settings
    window_title: str = "Dictionary"
    window_width: int = 800
    window_height: int = 800
    status_timeout_ms: int = 2500

    def __post_init__(self):
        """Normalize the base path so URL building can always join with '/'."""
        path = "/" + self.base_path.strip("/")
        object.__setattr__(self, "base_path", path)

    @property
    def base_url(self) -> str:
        """Scheme, host and base path without a trailing slash."""
        return f"https://{self.api_host}{self.base_path}"

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)
