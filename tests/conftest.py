"""
Pytest configuration and fixtures.
"""
import importlib.util
import json
from decimal import Decimal
from pathlib import Path

import pytest
from boto3.dynamodb.types import TypeSerializer

from payments_api import dynamodb

SERIALIZER = TypeSerializer()

LAMBDAS_DIR = Path(__file__).resolve().parent.parent / "lambdas"


class FakeTable:
    """In-memory stand-in for a boto3 DynamoDB Table keyed on paymentId."""

    def __init__(self, page_size=2):
        self.items = {}
        self.page_size = page_size
        self.put_calls = []
        self.get_calls = []
        self.scan_calls = []
        self.fail_on = set()
        self.drop_writes = False

    def _maybe_fail(self, op):
        if op in self.fail_on:
            raise RuntimeError(f"{op} failed")

    def put_item(self, Item):
        self._maybe_fail("put_item")
        # same number rules as the real client: floats and inexact Decimals raise
        SERIALIZER.serialize(Item)
        self.put_calls.append(Item)
        if not self.drop_writes:
            self.items[Item["paymentId"]] = dict(Item)
        return {}

    def get_item(self, Key, ConsistentRead=False):
        self._maybe_fail("get_item")
        self.get_calls.append({"Key": Key, "ConsistentRead": ConsistentRead})
        item = self.items.get(Key["paymentId"])
        return {"Item": dict(item)} if item else {}

    def scan(self, FilterExpression=None, ExclusiveStartKey=None):
        self._maybe_fail("scan")
        self.scan_calls.append({"FilterExpression": FilterExpression,
                                "ExclusiveStartKey": ExclusiveStartKey})
        keys = sorted(self.items)
        if ExclusiveStartKey:
            keys = keys[keys.index(ExclusiveStartKey["paymentId"]) + 1:]
        page = keys[:self.page_size]
        items = [dict(self.items[k]) for k in page]
        if FilterExpression is not None:
            attr, value = FilterExpression.get_expression()["values"]
            items = [i for i in items if i.get(attr.name) == value]
        out = {"Items": items}
        if len(keys) > self.page_size:
            out["LastEvaluatedKey"] = {"paymentId": page[-1]}
        return out


def load_lambda(name):
    """Every function ships a module named lambda_function, so load by path."""
    path = LAMBDAS_DIR / name / "lambda_function.py"
    spec = importlib.util.spec_from_file_location(f"{name}_lambda_function", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class LambdaContext:
    aws_request_id = "test-request-id"


def body_of(resp):
    return json.loads(resp["body"])


@pytest.fixture
def table(monkeypatch):
    t = FakeTable()
    monkeypatch.setattr(dynamodb, "get_table", lambda table_name=None: t)
    return t


@pytest.fixture
def seeded(table):
    for pid, amount, currency in [
        ("p-1", Decimal("100"), "USD"),
        ("p-2", Decimal("200.5"), "EUR"),
        ("p-3", Decimal("300"), "USD"),
        ("p-4", Decimal("42"), "usd"),
        ("p-5", Decimal("7"), "GBP"),
    ]:
        table.items[pid] = {"paymentId": pid, "amount": amount, "currency": currency}
    return table


@pytest.fixture
def context():
    return LambdaContext()


@pytest.fixture(scope="session")
def create_fn():
    return load_lambda("CreatePaymentFn")


@pytest.fixture(scope="session")
def get_fn():
    return load_lambda("GetPaymentFn")


@pytest.fixture(scope="session")
def list_fn():
    return load_lambda("ListPaymentsFn")
