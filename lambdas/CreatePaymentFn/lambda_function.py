# lambda_function.py
from payments_api import dynamodb, payments
from payments_api.apigateway import build_response, error_body, parse_input
from payments_api.config import SUPPORTED_CURRENCIES
from payments_api.logs import jlog, request_id, trace
from payments_api.payments import PaymentValidationError


def lambda_handler(event, context):
    req_id = request_id(event, context)

    try:
        body = parse_input(event.get("body") or "{}", is_base64=bool(event.get("isBase64Encoded")))

        try:
            amount, currency = payments.validate_payment_input(body, SUPPORTED_CURRENCIES)
        except PaymentValidationError as e:
            jlog("create_rejected", level="warning", req_id=req_id, reason=str(e))
            return build_response(422, error_body("Unprocessable Entity", str(e)))

        # never trust an id from the caller
        payment_id = payments.new_payment_id()
        jlog("create_request", req_id=req_id, payment_id=payment_id, currency=currency)

        table = dynamodb.get_table()
        payments.create_payment({"paymentId": payment_id, "amount": amount, "currency": currency}, table)

        # read-after-write: only answer 201 for a record the store hands back
        stored = payments.get_payment(payment_id, table, consistent=True)
        if not stored:
            jlog("create_unverified", level="error", req_id=req_id, payment_id=payment_id)
            return build_response(500, error_body("Internal Server Error",
                                                  "Payment creation verification failed"))

        jlog("create_ok", req_id=req_id, payment_id=payment_id)
        return build_response(201, stored)

    except Exception as e:
        jlog("error", level="error", req_id=req_id, where="create_payment", error=str(e), trace=trace())
        return build_response(500, error_body("Internal Server Error",
                                              "An error occurred while creating the payment"))
