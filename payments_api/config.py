# config.py
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(__file__).resolve().parent.parent / ".env", override=False)

# ====== STORAGE ======
TABLE_NAME = os.getenv("PAYMENTS_TABLE", "Payments")
REGION = os.getenv("AWS_REGION", "us-east-1")
DYNAMODB_ENDPOINT_URL = os.getenv("DYNAMODB_ENDPOINT_URL") or None

# ====== LOGGING ======
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ====== CURRENCIES ======
# Small fixed set for now, can be replaced by a rates/reference API later.
DEFAULT_CURRENCIES = ("USD", "EUR", "GBP", "AUD", "CAD", "SGD", "JPY", "CNY", "NZD", "CHF")


def _currencies(raw):
    if not raw:
        return DEFAULT_CURRENCIES
    codes = [c.strip() for c in raw.split(",") if c.strip()]
    return tuple(dict.fromkeys(codes)) or DEFAULT_CURRENCIES


SUPPORTED_CURRENCIES = _currencies(os.getenv("SUPPORTED_CURRENCIES"))

# ====== CLIENT ======
API_BASE = (os.getenv("API_BASE") or "").rstrip("/") or None
