# payments.py
import math, re, uuid
from decimal import Decimal
from typing import Optional, TypedDict, Union

from boto3.dynamodb.conditions import Attr

from payments_api import dynamodb

CURRENCY_RE = re.compile(r"[A-Z]{3}")


class Payment(TypedDict):
    paymentId: str
    amount: Union[int, float]
    currency: str


class PaymentValidationError(ValueError):
    """Client input that can never become a Payment (mapped to 422)."""


# ====== VALIDATION ======
def validate_payment_input(payload: dict, supported) -> tuple:
    """Check amount then currency, stopping at the first problem.

    Returns ``(amount, currency)``; anything else in the payload, a
    caller-supplied id included, is ignored.
    """
    amount = payload.get("amount")
    if amount is None:
        raise PaymentValidationError("Amount is required")
    # bool is an int subclass; JSON true/false is not an amount
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise PaymentValidationError("Amount must be a number")
    if isinstance(amount, int):
        # amounts are doubles on the wire; ints too large for one are infinite
        try:
            amount = float(amount)
        except OverflowError:
            raise PaymentValidationError("Amount must be a finite number") from None
    if not math.isfinite(amount):
        raise PaymentValidationError("Amount must be a finite number")
    if amount <= 0:
        raise PaymentValidationError("Amount must be greater than zero")

    currency = payload.get("currency")
    if currency is None or currency == "":
        raise PaymentValidationError("Currency is required")
    if not isinstance(currency, str):
        raise PaymentValidationError("Currency must be a string")
    if not CURRENCY_RE.fullmatch(currency):
        raise PaymentValidationError("Currency must be a 3-letter uppercase ISO code (e.g., USD, EUR)")
    if currency not in supported:
        raise PaymentValidationError(
            f"Currency {currency} is not supported. Supported currencies: {', '.join(supported)}"
        )
    return amount, currency


def new_payment_id() -> str:
    return str(uuid.uuid4())


# ====== ITEM CONVERSION ======
def _to_item(payment: dict) -> dict:
    item = dict(payment)
    if isinstance(item.get("amount"), float):
        # boto3 refuses floats; str() keeps 99.99 as 99.99
        item["amount"] = Decimal(str(item["amount"]))
    return item


def _from_dynamo(v):
    if isinstance(v, Decimal):
        return int(v) if v == v.to_integral_value() else float(v)
    if isinstance(v, dict):
        return {k: _from_dynamo(x) for k, x in v.items()}
    if isinstance(v, list):
        return [_from_dynamo(x) for x in v]
    return v


# ====== STORE ======
def create_payment(payment: Payment, table=None) -> None:
    if table is None:
        table = dynamodb.get_table()
    table.put_item(Item=_to_item(payment))


def get_payment(payment_id: str, table=None, consistent=False) -> Optional[Payment]:
    if table is None:
        table = dynamodb.get_table()
    r = table.get_item(Key={"paymentId": payment_id}, ConsistentRead=consistent)
    item = r.get("Item")
    return _from_dynamo(item) if item else None


def list_payments(currency: Optional[str] = None, table=None) -> list:
    """Scan the whole table, optionally keeping one currency (exact match)."""
    if table is None:
        table = dynamodb.get_table()
    args = {}
    if currency:
        args["FilterExpression"] = Attr("currency").eq(currency)
    items = []
    while True:
        page = table.scan(**args)
        items.extend(page.get("Items") or [])
        lek = page.get("LastEvaluatedKey")
        if not lek:
            break
        args["ExclusiveStartKey"] = lek
    return [_from_dynamo(i) for i in items]
