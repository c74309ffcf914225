import logging
from typing import Any

from clickshortener.exceptions import ShortURLExpiredError, ShortURLNotFoundError
from clickshortener.lambdas.helpers import build_service
from clickshortener.lambdas.responses import response_302, response_400, response_404, response_410, response_500
from clickshortener.utils.config import CONFIG_ERRORS, load_config
from clickshortener.utils.helpers import get_header, get_short_url, guarantee_500_response
from clickshortener.lambdas.redirect_url.constants import (
    MISSING_SHORTCODE,
    SHORT_URL_NOT_FOUND,
    SHORT_URL_EXPIRED,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Handle incoming API Gateway requests to redirect URLs

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Extract shortcode from request path
    - Step 2: Resolve the short URL and record the click
    - Step 3: Redirect client to target URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: target URL destination
        400: Bad client request
            message: missing shortcode in path parameters
        404: Not found
            message: the short URL doesn't exist
        410: Gone
            message: the short URL has expired
        500: Internal server error

    Args:
        event (dict):
            API Gateway event payload containing the shortcode path parameter.
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        dict:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'shortcode': 'Gh71TC'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 0- Get application's config
    try:
        app_config = load_config('redirect_url')
    except CONFIG_ERRORS:
        logger.exception('Failed to load AppConfig for redirect URL function. Responding with 500.')
        return response_500()

    # 1- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if shortcode is None:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return response_400(message="missing 'shortcode' in path", error_code=MISSING_SHORTCODE)
    short_url = get_short_url(shortcode, event)
    logger.debug('Client requested short URL %s.', short_url)

    # 2- Resolve the short URL and record the click
    service = build_service(app_config)
    try:
        target_url = service.redirect(
            shortcode,
            referrer=get_header(event, 'Referer'),
            user_agent=get_header(event, 'User-Agent'),
        )
    except ShortURLNotFoundError:
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(message=f"short url {short_url} doesn't exist", error_code=SHORT_URL_NOT_FOUND)
    except ShortURLExpiredError:
        logger.info(
            'Short URL record has expired. Responding with 410.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_EXPIRED},
        )
        return response_410(message=f'short url {short_url} has expired', error_code=SHORT_URL_EXPIRED)

    # 3- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=target_url)
