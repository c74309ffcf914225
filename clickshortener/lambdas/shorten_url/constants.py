INVALID_JSON = 'INVALID_JSON'
MISSING_URLS = 'MISSING_URLS'
MALFORMED_SUBMISSION = 'MALFORMED_SUBMISSION'
VALIDATION_FAILED = 'VALIDATION_FAILED'
SHORTCODE_CONFLICT = 'SHORTCODE_CONFLICT'
SHORTCODE_EXHAUSTED = 'SHORTCODE_EXHAUSTED'
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
