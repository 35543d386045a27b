import os
import logging
import json
import threading # For singleton lock
from types import MappingProxyType
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

# Singleton instance and lock
_config_instance = None
_config_lock = threading.Lock()

REQUIRED_SERVICE_ACCOUNT_FIELDS = ("client_email", "private_key")


class AppConfig:
    """Holds the relay configuration, loaded once as a singleton."""
    def __init__(self):
        logger.debug("Initializing AppConfig instance...")
        self.service_account_json_string: Optional[str] = None
        self._service_account_info: Optional[Mapping[str, Any]] = None

    @property
    def service_account_info(self) -> Mapping[str, Any]:
        """The parsed service account credential (read-only)."""
        if self._service_account_info is None:
            raise RuntimeError("AppConfig has not been loaded")
        return self._service_account_info

    def _load_service_account_json(self):
        """Loads the raw service account JSON string.

        Priority: GOOGLE_APPLICATION_CREDENTIALS file path, then the
        GOOGLE_SERVICE_ACCOUNT environment variable.
        """
        gac_path = os.environ.get("GOOGLE_APPLICATION_CREDENTIALS")
        sa_json_env = os.environ.get("GOOGLE_SERVICE_ACCOUNT")

        if gac_path:
            logger.info(f"GOOGLE_APPLICATION_CREDENTIALS path found: {gac_path}")
            try:
                with open(gac_path, 'r') as f:
                    self.service_account_json_string = f.read()
                logger.info(f"Successfully loaded service account JSON from file: {gac_path}")
            except FileNotFoundError:
                logger.error(f"Service account file specified by GOOGLE_APPLICATION_CREDENTIALS not found: {gac_path}")
                raise ValueError(f"Service account file not found: {gac_path}")
            except OSError as e:
                logger.error(f"Error reading service account file {gac_path}: {e}", exc_info=True)
                raise ValueError(f"Error reading service account file: {gac_path}")
        elif sa_json_env:
            logger.info("Using GOOGLE_SERVICE_ACCOUNT environment variable for service account key.")
            self.service_account_json_string = sa_json_env
        else:
            logger.error("Service account credentials not found. Set either GOOGLE_APPLICATION_CREDENTIALS (path) or GOOGLE_SERVICE_ACCOUNT (content) environment variable.")
            raise ValueError("GOOGLE_SERVICE_ACCOUNT environment variable not set")

    def _parse_service_account(self):
        try:
            info = json.loads(self.service_account_json_string)
        except json.JSONDecodeError as e:
            logger.critical(f"Failed to parse service account JSON: {e}")
            raise ValueError("Invalid service account JSON in configuration") from e

        if not isinstance(info, dict):
            raise ValueError("Service account JSON must be an object")

        missing = [field for field in REQUIRED_SERVICE_ACCOUNT_FIELDS if not info.get(field)]
        if missing:
            logger.critical(f"Service account JSON is missing fields: {missing}")
            raise ValueError(f"Service account JSON is missing required fields: {', '.join(missing)}")

        self._service_account_info = MappingProxyType(info)
        logger.info(f"Service account loaded for {info['client_email']}")

    def load(self):
        """Load and validate the service account credential."""
        logger.info("Loading application configuration...")
        self._load_service_account_json()
        self._parse_service_account()
        logger.info("Configuration loading complete.")


def get_config() -> AppConfig:
    """Gets the singleton AppConfig instance, loading it on first call.

    A failed load is not cached, so the next call tries again.
    """
    global _config_instance
    if _config_instance is None:
        with _config_lock:
            # Double-check locking
            if _config_instance is None:
                logger.info("Creating and loading singleton AppConfig instance.")
                temp_instance = AppConfig()
                try:
                    temp_instance.load()
                    _config_instance = temp_instance
                except Exception as e:
                    logger.critical(f"Failed to load configuration: {e}")
                    raise

    return _config_instance


def reset_config() -> None:
    """Drops the cached configuration so the next get_config() reloads it."""
    global _config_instance
    with _config_lock:
        _config_instance = None
