import json
import logging
from typing import Any

from clickshortener.exceptions import BatchValidationError, ShortcodeExhaustedError, ValidationError
from clickshortener.models import SubmissionModel
from clickshortener.lambdas.helpers import build_service, serialize_short_url
from clickshortener.lambdas.responses import response_200, response_400, response_409, response_500
from clickshortener.utils.config import CONFIG_ERRORS, load_config
from clickshortener.utils.helpers import guarantee_500_response
from clickshortener.lambdas.shorten_url.constants import (
    INVALID_JSON,
    MISSING_URLS,
    MALFORMED_SUBMISSION,
    VALIDATION_FAILED,
    SHORTCODE_CONFLICT,
    SHORTCODE_EXHAUSTED,
    SHORTEN_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle incoming API Gateway requests to shorten a batch of URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Extract the submissions from the request body
    - Step 2: Validate the whole batch and create one record per URL
    - Step 3: Respond with the created short URLs

    Request body:
        {"urls": [{"url": "...", "validityMinutes": 30, "customShortCode": "abc"}, ...]}
        validityMinutes and customShortCode are optional. 1 to 5 URLs per request.

    HTTP responses:
        200: Successful URL shortening
            message: success message
            short_urls: created records (with their public short URL)
        400: Bad client request
            message: invalid JSON, missing 'urls' list or malformed submission
            errors: field errors keyed by submission index (VALIDATION_FAILED)
        409: Conflict
            message: a custom short code was taken while the batch was being written
        500: Internal server error

    Args:
        event (Dict[str, Any]):
            API Gateway event payload in Lambda Proxy format.
        context (Any):
            AWS Lambda context object containing runtime information.

    Returns:
        Dict[str, Any]:
            JSON-serializable response following API Gateway Lambda Proxy output format.

    Example:
        >>> event = {'body': '{"urls": [{"url": "https://example.com"}]}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
    """
    # 0- Get application's config
    try:
        app_config = load_config('shorten_url')
    except CONFIG_ERRORS:
        logger.exception('Failed to load AppConfig for shorten URL function. Responding with 500.')
        return response_500()

    # 1- Extract submissions from request body
    try:
        request_body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON})
        return response_400(message='invalid JSON body', error_code=INVALID_JSON)

    payload = request_body.get('urls') if isinstance(request_body, dict) else None
    if not isinstance(payload, list):
        logger.info("Missing 'urls' list in body. Responding with 400.", extra={'event': MISSING_URLS})
        return response_400(message="missing 'urls' list in JSON body", error_code=MISSING_URLS)

    try:
        submissions = [SubmissionModel.from_dict(item) for item in payload]
    except ValueError as e:
        logger.info('Malformed submission in body. Responding with 400.', extra={'event': MALFORMED_SUBMISSION, 'reason': str(e)})
        return response_400(message=str(e), error_code=MALFORMED_SUBMISSION)

    # 2- Validate and shorten the whole batch
    service = build_service(app_config)
    try:
        short_urls = service.shorten_batch(submissions)
    except BatchValidationError as e:
        errors = {str(index): [error.to_dict() for error in errors] for index, errors in e.errors_by_index.items()}
        logger.info('Batch failed validation. Responding with 400.', extra={'event': VALIDATION_FAILED, 'errors': errors})
        return response_400(message='validation failed', error_code=VALIDATION_FAILED, errors=errors)
    except ValidationError as e:
        errors = [error.to_dict() for error in e.errors]
        logger.info('Batch failed while writing. Responding with 409.', extra={'event': SHORTCODE_CONFLICT, 'errors': errors})
        return response_409(message='batch partially written', error_code=SHORTCODE_CONFLICT, errors=errors)
    except ShortcodeExhaustedError:
        logger.exception('Failed to draw a free short code. Responding with 500.', extra={'event': SHORTCODE_EXHAUSTED})
        return response_500(error_code=SHORTCODE_EXHAUSTED)

    # 3- Return successful response to user
    logger.info('Shortened %s URLs. Responding with 200.', len(short_urls), extra={'event': SHORTEN_SUCCESS})
    return response_200(
        {
            'message': f'Successfully shortened {len(short_urls)} URLs',
            'short_urls': [serialize_short_url(short_url, event) for short_url in short_urls],
        }
    )
