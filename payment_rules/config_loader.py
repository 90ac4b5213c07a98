"""Two-tier configuration loading with URI fetching and caching."""

import hashlib
import logging
import os
import time
import urllib.parse
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, Optional

import requests
import yaml

logger = logging.getLogger(__name__)

DEFAULT_POLICY = {
    "max_amount": 100_000_000,
    "max_payment_age_years": 1,
    "min_reason_length": 10,
    "edit_window_days": 30,
    "delete_window_days": 7,
}


class ConfigLoader:
    """Handles two-tier configuration: local config + business config."""

    CACHE_DIR = Path.home() / ".cache" / "payment-rules"

    def __init__(self, local_config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            local_config_path: Path to a local-config.yaml. Defaults to the
                file bundled in the payment_rules package.

        Raises:
            ValueError: If the business config URI uses an unsupported scheme
            RuntimeError: If a remote business config cannot be fetched
        """
        if local_config_path is None:
            local_config_path = str(files("payment_rules").joinpath("local-config.yaml"))
        self.local_config_path = local_config_path
        self.cache_dir = self.CACHE_DIR

        self.local_config = self._load_yaml(self.local_config_path) or {}
        self.http_timeout = self.local_config.get("http_timeout_seconds", 10)

        business_config_uri = self.local_config.get("business_config_uri")
        if business_config_uri:
            self.business_config = self._load_config_from_uri(business_config_uri) or {}
        else:
            # No separate business config: local config carries rulesets itself
            self.business_config = self.local_config
        self.business_config_loaded_at = time.time()

        logger.info(
            "Configuration loaded",
            extra={
                "local_config": self.local_config_path,
                "business_config_uri": business_config_uri,
                "rulesets": sorted(self.business_config.get("rulesets", {})),
            },
        )

    def _load_yaml(self, path: str) -> Dict[str, Any]:
        """Load YAML file from disk."""
        with open(path) as f:
            return yaml.safe_load(f)

    def _load_config_from_uri(self, uri: str) -> Dict[str, Any]:
        """
        Load config from URI (with caching).

        Supports:
        - Relative paths - resolved against the local config directory
        - file:// - Local filesystem (absolute paths)
        - https:// / http:// - Remote, cached under CACHE_DIR

        Args:
            uri: Config URI or relative path

        Returns:
            Parsed YAML config
        """
        parsed = urllib.parse.urlparse(uri)

        if not parsed.scheme:
            config_dir = os.path.dirname(os.path.abspath(self.local_config_path))
            return self._load_yaml(os.path.join(config_dir, uri))

        if parsed.scheme == "file":
            return self._load_yaml(urllib.parse.unquote(parsed.path))

        if parsed.scheme in ("http", "https"):
            cache_key = hashlib.sha256(uri.encode()).hexdigest()
            cache_path = self.cache_dir / f"config_{cache_key}.yaml"

            if cache_path.exists():
                logger.debug("Using cached business config", extra={"path": str(cache_path)})
                return self._load_yaml(str(cache_path))

            content = self._fetch_uri(uri)
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            cache_path.write_text(content)
            return yaml.safe_load(content)

        raise ValueError(f"Unsupported URI scheme: {parsed.scheme} in {uri}")

    def _fetch_uri(self, uri: str) -> str:
        """Fetch content from HTTP/HTTPS URI."""
        try:
            response = requests.get(uri, timeout=self.http_timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise RuntimeError(f"Failed to fetch config from {uri}: {e}") from e
        return response.text

    def get_business_config(self) -> Dict[str, Any]:
        """Get business configuration (tier 2)."""
        return self.business_config

    def get_local_config(self) -> Dict[str, Any]:
        """Get local configuration (tier 1)."""
        return self.local_config

    def get_policy(self) -> Dict[str, Any]:
        """Policy limits from the business config, filled in with defaults."""
        policy = dict(DEFAULT_POLICY)
        policy.update(self.business_config.get("policy") or {})
        return policy

    def get_business_config_age(self) -> Optional[float]:
        """
        Get age of business config in seconds since it was loaded.

        Returns:
            Age in seconds, or None if not loaded
        """
        if hasattr(self, "business_config_loaded_at"):
            return time.time() - self.business_config_loaded_at
        return None
