"""
config.py: default settings for SEOLens.

Sections are keyed by the component that reads them. Selected values can be
overridden through environment variables, and a JSON file can be merged on
top with `load_config`.
"""
import copy
import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

DEFAULT_CONFIG = {
    "Global": {
        "request_timeout": float(os.getenv("SEOLENS_REQUEST_TIMEOUT", 15)),
        "user_agent": DEFAULT_USER_AGENT,
        "accept_language": "en-US,en;q=0.5",
        "http_retries_total": int(os.getenv("SEOLENS_HTTP_RETRIES", 2)),
        "http_backoff_factor": 0.2,
        "http_status_forcelist": [429, 500, 502, 503, 504],
    },
    "MetaTagsAnalyzer": {
        "title_min_length": 30, "title_max_length": 60,
        "desc_min_length": 120, "desc_max_length": 160,
    },
    "ScoringModule": {
        "category_weights": {"metaTags": 0.4, "socialMedia": 0.3, "technicalSeo": 0.3},
    },
    "Loader": {
        # Hosts that refuse automated access; matched against the host and its subdomains
        "blocked_hosts": ["facebook.com", "instagram.com", "twitter.com", "x.com"],
    },
    "Storage": {"recent_limit": int(os.getenv("SEOLENS_RECENT_LIMIT", 10))},
    "Server": {
        "host": os.getenv("SEOLENS_HOST", "127.0.0.1"),
        "port": int(os.getenv("SEOLENS_PORT", 5000)),
    },
}


def default_config() -> dict:
    """Returns a deep copy of DEFAULT_CONFIG that callers may mutate."""
    return copy.deepcopy(DEFAULT_CONFIG)


def merge_config(base: dict, overrides: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(path: str | None = None) -> dict:
    """
    Builds the effective configuration.

    Each top-level section of the JSON file at `path` is merged into the
    matching default section. A missing or unreadable file is logged and the
    defaults are used.
    """
    config = default_config()
    if not path:
        return config
    try:
        with open(path, "r") as f:
            custom_config = json.load(f)
    except FileNotFoundError:
        logger.warning("Config file %s not found. Using default settings.", path)
        return config
    except json.JSONDecodeError:
        logger.warning("Error decoding JSON from %s. Using default settings.", path)
        return config
    logger.info("Loaded custom configuration from %s", path)
    return merge_config(config, custom_config)
