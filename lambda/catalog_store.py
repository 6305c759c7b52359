import os
from collections import namedtuple
from functools import lru_cache

import boto3

DEFAULT_TABLE_NAME = "Project-ServiceCatalog"
DEFAULT_REGION = "us-east-1"
DEFAULT_API_VERSION = "2012-08-10"

StoreConfig = namedtuple('StoreConfig', ['table_name', 'region', 'api_version'])


def load_config(environ=None):
    """Read table name, region and DynamoDB API version from the environment."""
    if environ is None:
        environ = os.environ

    return StoreConfig(
        table_name=environ.get('TABLE_NAME') or DEFAULT_TABLE_NAME,
        region=environ.get('TABLE_REGION') or DEFAULT_REGION,
        api_version=environ.get('DYNAMODB_API_VERSION') or DEFAULT_API_VERSION
    )


@lru_cache(maxsize=1)
def get_table(config=None):
    if config is None:
        config = load_config()

    dynamodb = boto3.resource('dynamodb',
                              region_name=config.region,
                              api_version=config.api_version)
    return dynamodb.Table(config.table_name)


def scan_all_items(table):
    """
    Return every item in the table as one list, in scan order.

    DynamoDB caps each Scan response at 1 MB, so pages are followed through
    LastEvaluatedKey. Errors from the scan are not caught here.
    """
    items = []
    scan_kwargs = {}

    while True:
        response = table.scan(**scan_kwargs)
        items.extend(response.get('Items', []))

        last_evaluated_key = response.get('LastEvaluatedKey')
        if not last_evaluated_key:
            break
        scan_kwargs['ExclusiveStartKey'] = last_evaluated_key

    return items
