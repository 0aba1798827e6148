# logs.py
import json, logging, traceback

from payments_api.config import LOG_LEVEL


def _level(name):
    # unknown names fall back to INFO instead of breaking every handler at import
    lvl = logging.getLevelName(name)
    return lvl if isinstance(lvl, int) else logging.INFO


log = logging.getLogger()
log.setLevel(_level(LOG_LEVEL))

TRACE_MAX_CHARS = 1500


def jlog(evt, level="info", **kw):
    """One JSON record per line so CloudWatch Insights can query the fields."""
    emit = getattr(log, level)
    rec = {"evt": evt, **kw}
    try:
        emit(json.dumps(rec, ensure_ascii=False))
    except (TypeError, ValueError):
        emit(f"{evt} | {kw}")


def trace():
    return traceback.format_exc()[:TRACE_MAX_CHARS]


def request_id(event, context):
    return ((event or {}).get("requestContext") or {}).get("requestId") \
        or getattr(context, "aws_request_id", None)
