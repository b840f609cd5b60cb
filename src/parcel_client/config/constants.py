"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "parcel-client"
APP_AUTHOR = "oasislabs"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_API_URL = "PARCEL_API_URL"
ENV_API_TOKEN = "PARCEL_API_TOKEN"
ENV_PROFILE = "PARCEL_PROFILE"

# API defaults
DEFAULT_API_URL = "https://api.oasislabs.com/parcel/v1"
DEFAULT_TIMEOUT = 30.0
DOWNLOAD_CHUNK_SIZE = 64 * 1024
