# dynamodb.py
import boto3

from payments_api.config import DYNAMODB_ENDPOINT_URL, REGION, TABLE_NAME


def get_table(table_name=None):
    """Fresh Table handle; handlers call this once per invocation."""
    ddb = boto3.resource("dynamodb", region_name=REGION, endpoint_url=DYNAMODB_ENDPOINT_URL)
    return ddb.Table(table_name or TABLE_NAME)
