# lambda_function.py
from payments_api import payments
from payments_api.apigateway import build_response, error_body
from payments_api.logs import jlog, request_id, trace


def lambda_handler(event, context):
    req_id = request_id(event, context)

    try:
        payment_id = (event.get("pathParameters") or {}).get("id")
        if not payment_id:
            jlog("get_rejected", level="warning", req_id=req_id, reason="missing id")
            return build_response(400, error_body("Bad Request", "Payment ID not provided"))

        jlog("get_request", req_id=req_id, payment_id=payment_id)
        payment = payments.get_payment(payment_id)

        if not payment:
            jlog("get_not_found", level="warning", req_id=req_id, payment_id=payment_id)
            return build_response(404, error_body("Not Found", f"Payment not found for ID: {payment_id}"))

        return build_response(200, payment)

    except Exception as e:
        jlog("error", level="error", req_id=req_id, where="get_payment", error=str(e), trace=trace())
        return build_response(500, error_body("Internal Server Error",
                                              "An error occurred while retrieving payment."))
