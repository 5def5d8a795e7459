from __future__ import annotations

# Standard library imports
import os
from typing import Optional

# ----------------------------------------------------------------------------------
# ENV HELPERS
# ----------------------------------------------------------------------------------


def _env_float(name: str, default: float) -> float:
    try:
        raw = os.getenv(name)
        raw = raw.strip() if isinstance(raw, str) else None
        return float(raw) if raw else default
    except (TypeError, ValueError):
        return default


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    raw = raw.strip() if isinstance(raw, str) else None
    return raw or default


# ----------------------------------------------------------------------------------
# BLEND / ARTICULATION TUNING
# ----------------------------------------------------------------------------------
# Hand-tuned creative balance parameters. Callers may override per call; the env
# variables only change the process-wide defaults.

# Chance that a frequency-weighted blend draws from the more common half.
TOP_HALF_SELECTION_WEIGHT: float = _env_float('STYLE_ENGINE_TOP_HALF_WEIGHT', 0.75)

# Chance that a suggested instrument gets an articulation prefix.
ARTICULATION_CHANCE: float = _env_float('STYLE_ENGINE_ARTICULATION_CHANCE', 0.4)

# ----------------------------------------------------------------------------------
# TRACE LIMITS
# ----------------------------------------------------------------------------------
TRUNCATION_MARKER: str = '…[truncated]'
TRACE_REDACTION_TOKEN: str = '[REDACTED]'

TRACE_BRANCH_MAX_CHARS: int = 240
TRACE_WHY_MAX_CHARS: int = 500
TRACE_SUMMARY_MAX_CHARS: int = 500
TRACE_KEY_MAX_CHARS: int = 120
TRACE_LABEL_MAX_CHARS: int = 200
TRACE_PREVIEW_MAX_CHARS: int = 2000
TRACE_ERROR_MESSAGE_MAX_CHARS: int = 500
TRACE_CANDIDATES_PREVIEW_MAX: int = 5
TRACE_CANDIDATE_ITEM_MAX_CHARS: int = 80
TRACE_ROLLS_MAX: int = 64

# Upper bound for an exported run (UTF-8 bytes of the JSON payload).
TRACE_PERSISTED_BYTES_CAP: int = 64 * 1024

# ----------------------------------------------------------------------------------
# EXTERNAL TABLES
# ----------------------------------------------------------------------------------
DEFAULT_TABLES_PATH: str = os.path.join('config', 'selection_tables.yml')
TABLE_CACHE_TTL_MS: int = 30_000


def tables_path(override: Optional[str] = None) -> str:
    """Return the selection tables path.

    Defaults to 'config/selection_tables.yml'. Override with STYLE_ENGINE_TABLES_PATH.
    """
    if override:
        return override
    return _env_str('STYLE_ENGINE_TABLES_PATH', DEFAULT_TABLES_PATH)
