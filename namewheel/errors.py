"""Error handling and logging infrastructure.

The wheel itself never raises for user-driven misuse (spinning twice,
reconfiguring mid-spin); those paths are logged at debug level instead.
Everything else is logged to file when debugging is enabled.
"""

import logging
import os
import traceback
from pathlib import Path

# Only log to file in development mode (set NAMEWHEEL_DEBUG=1)
DEBUG_MODE = os.environ.get("NAMEWHEEL_DEBUG", "").lower() in ("1", "true", "yes")
LOG_FILE = Path.home() / "namewheel.log"
CRASH_LOG_FILE = Path.home() / "namewheel-crash.log"

# Configure module logger
log = logging.getLogger("namewheel")


def setup_logging(level: int = logging.DEBUG) -> None:
    """Initialize logging to file. Call once at app startup.

    Configures the root 'namewheel' logger so all child loggers
    (namewheel.wheel, namewheel.widgets.*, etc.) inherit the handler.

    Only logs to file if NAMEWHEEL_DEBUG env var is set.
    """
    if not DEBUG_MODE:
        return

    handler = logging.FileHandler(LOG_FILE, mode="a")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    log.addHandler(handler)
    log.setLevel(level)
    log.propagate = False
    log.info("Logging initialized")


def log_exception(e: Exception, context: str = "") -> str:
    """Log an exception with context. Returns formatted message for display."""
    tb = "".join(traceback.format_exception(type(e), e, e.__traceback__))
    if context:
        log.error(f"{context}: {e}\n{tb}")
        return f"{context}: {e}"
    log.error(f"{e}\n{tb}")
    return str(e)
