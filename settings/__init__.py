"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("POLL_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("POLL_LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("POLL_LOG_FILE", "").lower() in ("1", "true", "yes")

# Functions API
FUNCTIONS_BASE = os.getenv("FUNCTIONS_BASE")
FUNCTION_CODE = os.getenv("FUNCTION_CODE")
FUNCTIONS_TIMEOUT = os.getenv("FUNCTIONS_TIMEOUT")
