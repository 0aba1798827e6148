# apigateway.py
import base64, binascii, json
from decimal import Decimal

from payments_api.logs import jlog

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true",
}


def _json_default(o):
    # DynamoDB hands numbers back as Decimal
    if isinstance(o, Decimal):
        return int(o) if o == o.to_integral_value() else float(o)
    raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")


def build_response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": json.dumps(body, default=_json_default),
    }


def error_body(error: str, message: str) -> dict:
    return {"error": error, "message": message}


def parse_input(body, is_base64=False) -> dict:
    """Best-effort decode of a proxy event body.

    Anything that does not decode to a JSON object comes back as ``{}``;
    the caller's validation then reports what is missing.
    """
    if body is None:
        return {}
    if isinstance(body, dict):
        return body
    try:
        if is_base64:
            body = base64.b64decode(body).decode("utf-8")
        parsed = json.loads(body)
    except (ValueError, TypeError, binascii.Error) as e:
        jlog("parse_input_failed", level="error", error=str(e))
        return {}
    if not isinstance(parsed, dict):
        jlog("parse_input_not_object", level="warning", got=type(parsed).__name__)
        return {}
    return parsed
