# client.py
# Calls a deployed stage of the payments API (API_BASE, e.g. https://xyz.execute-api.../prod).
import requests

from payments_api import config


def _base(api_base=None):
    base = (api_base or config.API_BASE or "").rstrip("/")
    if not base:
        raise RuntimeError("No API endpoint configured (set API_BASE)")
    return base


def _result(r, ok_status):
    try:
        body = r.json()
    except ValueError:
        return None, {"error": r.text}
    if r.status_code != ok_status:
        return None, body
    return body, None


def call_create(amount, currency: str, api_base=None):
    r = requests.post(f"{_base(api_base)}/payments",
                      json={"amount": amount, "currency": currency}, timeout=20)
    return _result(r, 201)


def call_get(payment_id: str, api_base=None):
    r = requests.get(f"{_base(api_base)}/payments/{requests.utils.quote(payment_id, safe='')}",
                     timeout=20)
    return _result(r, 200)


def call_list(currency: str = None, api_base=None):
    params = {"currency": currency} if currency else None
    r = requests.get(f"{_base(api_base)}/payments", params=params, timeout=30)
    data, err = _result(r, 200)
    if data is None:
        return None, err
    return data.get("data", []), None


# Health check (list is read-only, so it is safe to hit repeatedly)
def api_health(api_base=None):
    try:
        r = requests.get(f"{_base(api_base)}/payments", timeout=10)
        return (r.status_code == 200), f"API reachable: {r.status_code}"
    except (RuntimeError, requests.RequestException) as e:
        return False, f"API error: {e}"
