"""Runtime settings read from `.env`, Streamlit secrets and the environment."""
import logging
import os
from pathlib import Path
from typing import Any

import streamlit as st
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load a local .env for development; real environment variables win.
_env_path = Path(__file__).resolve().parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


def _secret(name: str, default: Any) -> Any:
    """Read `name` from Streamlit secrets, then the environment, then `default`."""
    try:
        if name in st.secrets:
            return st.secrets[name]
    except FileNotFoundError:
        # No secrets.toml; that's the normal local setup
        pass
    except Exception:
        logger.debug("Streamlit secrets unavailable, using environment for %s", name)
    return os.getenv(name, default)


def _float_setting(name: str, default: float) -> float:
    raw = _secret(name, default)
    try:
        return float(raw)
    except (TypeError, ValueError):
        logger.warning("Invalid value %r for %s, using %s", raw, name, default)
        return default


def _int_setting(name: str, default: int) -> int:
    raw = _secret(name, default)
    try:
        return int(float(raw))
    except (TypeError, ValueError):
        logger.warning("Invalid value %r for %s, using %s", raw, name, default)
        return default


APP_TITLE: str = str(_secret("APP_TITLE", "Inventory + POS Admin"))
LOG_LEVEL: str = str(_secret("LOG_LEVEL", "INFO")).upper()

TAX_RATE: float = _float_setting("TAX_RATE", 0.10)
LOW_STOCK_THRESHOLD: int = _int_setting("LOW_STOCK_THRESHOLD", 5)

CHECKOUT_PROCESSING_SECONDS: float = _float_setting("CHECKOUT_PROCESSING_SECONDS", 2.0)
CHECKOUT_SUCCESS_SECONDS: float = _float_setting("CHECKOUT_SUCCESS_SECONDS", 1.5)

TRANSACTIONS_PER_PAGE: int = _int_setting("TRANSACTIONS_PER_PAGE", 5)
