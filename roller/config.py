"""Runtime defaults, overridable through environment variables."""

import os

DEFAULT_COUNT = int(os.environ.get("ROLLER_DEFAULT_COUNT", "1"))
DEFAULT_FACES = int(os.environ.get("ROLLER_DEFAULT_FACES", "20"))

LOG_LEVEL = os.environ.get("ROLLER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Same layout as the report's timestamp line, milliseconds appended separately
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
