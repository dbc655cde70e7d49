import logging
import sys
from typing import Union

# --- Logging Setup (Application Level) ---
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
log = logging.getLogger("cube_kitchen") # Use a consistent logger name

def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configures root logging to stderr. Accepts a level number or name."""
    if isinstance(level, str):
        level_name = level.upper()
        resolved = logging.getLevelName(level_name)
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: '{level}'")
        level = resolved
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True # Force re-configuration if already configured elsewhere
    )
    log.debug(f"Logging configured at level {logging.getLevelName(level)}")

# --- Defaults ---
DEFAULT_LENGTH = 2.0 # Edge length used by the CLI when none is given

# Deferred computation: after DELAY_MS the value SEED_VALUE is produced,
# then multiplied by MULTIPLIER before it reaches the caller.
DELAY_MS = 1000
SEED_VALUE = 3
MULTIPLIER = 2

# --- CLI Configuration ---
LOG_LEVEL_ENVVAR = "CUBE_KITCHEN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
