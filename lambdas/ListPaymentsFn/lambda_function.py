# lambda_function.py
from payments_api import payments
from payments_api.apigateway import build_response, error_body
from payments_api.logs import jlog, request_id, trace


def lambda_handler(event, context):
    req_id = request_id(event, context)

    try:
        # no normalization: the filter is matched exactly as sent
        currency = (event.get("queryStringParameters") or {}).get("currency") or None
        jlog("list_request", req_id=req_id, currency=currency)

        items = payments.list_payments(currency)

        jlog("list_ok", req_id=req_id, count=len(items))
        return build_response(200, {"data": items})

    except Exception as e:
        jlog("error", level="error", req_id=req_id, where="list_payments", error=str(e), trace=trace())
        return build_response(500, error_body("Internal Server Error",
                                              "An error occurred while listing payments"))
