import logging
from typing import Any

from clickshortener.dao.exceptions import DAOError
from clickshortener.lambdas.helpers import build_service
from clickshortener.utils.config import CONFIG_ERRORS, load_config
from clickshortener.lambdas.cleanup_expired.constants import SUCCESS, ERROR


logger = logging.getLogger(__name__)


def response_success() -> dict:
    return {
        'status': SUCCESS,
        'message': 'Successfully swept expired short URLs',
    }


def response_error(*, reason: str, error: str) -> dict:
    return {
        'status': ERROR,
        'message': 'Failed to sweep expired short URLs',
        'reason': reason,
        'error': error,
    }


def lambda_handler(event: dict, context: Any) -> dict:
    """Sweep expired short URLs on a schedule

    Invoked by an EventBridge rule every 5 minutes (rate(5 minutes)) and once
    after each deployment. Reserved concurrency of 1 keeps sweeps from overlapping.

    Diagnostic responses:
        success:
            status: success
            message: Successfully swept expired short URLs
        error:
            status: error
            message: Failed to sweep expired short URLs
            reason: <reason>
            error: <error class name> (e.g. DataStoreError, ConfigurationError)

    Args:
        event (dict):
            EventBridge event payload.
        context (LambdaContext):
            AWS Lambda context object containing runtime information.

    Returns:
        dict: diagnostic status document.
    """
    try:
        app_config = load_config('cleanup_expired')
        service = build_service(app_config)
    except (*CONFIG_ERRORS, DAOError) as error:
        logger.exception(
            'Failed to sweep expired short URLs.',
            extra={'event': ERROR, 'reason': str(error), 'error': error.__class__.__name__},
        )
        return response_error(reason=str(error), error=error.__class__.__name__)

    if not service.cleanup_expired():
        return response_error(reason='sweep failed, see logs', error='DAOError')

    logger.info('Successfully swept expired short URLs.', extra={'event': SUCCESS})
    return response_success()
