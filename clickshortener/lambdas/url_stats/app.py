import logging
from typing import Any

from clickshortener.lambdas.helpers import build_service, serialize_short_url
from clickshortener.lambdas.responses import response_200, response_404, response_500
from clickshortener.utils.config import CONFIG_ERRORS, load_config
from clickshortener.utils.helpers import get_short_url, guarantee_500_response
from clickshortener.lambdas.url_stats.constants import SHORT_URL_NOT_FOUND, STATS_SUCCESS


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Handle incoming API Gateway requests for short URL statistics

    GET /stats lists every stored short URL (expired ones included, until
    they are swept). GET /stats/{shortcode} returns a single short URL; that
    lookup may mark the record as expired.

    HTTP responses:
        200: Statistics
            short_urls: every record (GET /stats)
            short_url: one record (GET /stats/{shortcode})
        404: Not found
            message: the short URL doesn't exist
        500: Internal server error
    """
    try:
        app_config = load_config('url_stats')
    except CONFIG_ERRORS:
        logger.exception('Failed to load AppConfig for URL stats function. Responding with 500.')
        return response_500()

    service = build_service(app_config)
    shortcode = (event.get('pathParameters') or {}).get('shortcode')

    if shortcode is None:
        short_urls = service.get_all_urls()
        logger.info('Listing %s short URLs. Responding with 200.', len(short_urls), extra={'event': STATS_SUCCESS})
        return response_200({'short_urls': [serialize_short_url(short_url, event) for short_url in short_urls]})

    short_url = service.get_url_stats(shortcode)
    if short_url is None:
        logger.info('Short URL record not found. Responding with 404.', extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND})
        return response_404(message=f"short url {get_short_url(shortcode, event)} doesn't exist", error_code=SHORT_URL_NOT_FOUND)

    logger.info('Returning stats for short URL. Responding with 200.', extra={'shortcode': shortcode, 'event': STATS_SUCCESS})
    return response_200({'short_url': serialize_short_url(short_url, event)})
