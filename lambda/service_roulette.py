import logging
import random

from botocore.exceptions import BotoCoreError, ClientError

from catalog_store import get_table, scan_all_items

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def create_response(status_code, body):
    return {
        'statusCode': status_code,
        'body': body,
        'headers': {
            'Access-Control-Allow-Origin': '*',
            'Access-Control-Allow-Credentials': True
        }
    }


def pick_random_service(services, rng=None):
    """Pick one service uniformly at random, or None for an empty catalog."""
    if not services:
        return None

    rng = rng or random
    index = rng.randrange(len(services))
    logger.info(f"Selected service {index} of {len(services)}")
    return services[index]


def handler(event, context):
    request_id = getattr(context, 'aws_request_id', None)
    logger.info(f"Received event: {event} (request {request_id})")

    try:
        services = scan_all_items(get_table())
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Error scanning service catalog: {str(e)}")
        raise

    if not services:
        logger.warning("Service catalog is empty, no service selected")

    return create_response(200, {
        'serviceList': services,
        'randomService': pick_random_service(services)
    })
