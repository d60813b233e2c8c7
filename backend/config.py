import os

# Database configuration
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./lineups.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS origins for the management UI (comma separated)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:5173",
    ).split(",")
    if origin.strip()
]

# Defaults applied to new lineups when the caller omits a field.
# These mirror a stock HDHomeRun CONNECT so Plex accepts the device.
DEFAULT_LISTEN_ADDRESS = os.getenv("DEFAULT_LISTEN_ADDRESS", "0.0.0.0")
DEFAULT_DISCOVERY_ADDRESS = os.getenv("DEFAULT_DISCOVERY_ADDRESS", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("DEFAULT_PORT", "6077"))
DEFAULT_TUNERS = int(os.getenv("DEFAULT_TUNERS", "1"))
DEFAULT_MANUFACTURER = "Silicondust"
DEFAULT_MODEL_NAME = "HDHR"
DEFAULT_MODEL_NUMBER = "HDTC-2US"
DEFAULT_FIRMWARE_NAME = "hdhomeruntc_atsc"
DEFAULT_FIRMWARE_VERSION = "20150826"
DEFAULT_DEVICE_ID = "12345678"
DEFAULT_DEVICE_AUTH = "telly123"
