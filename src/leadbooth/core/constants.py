"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# Slugs and subdomains
MAX_SLUG_LENGTH = 63
MAX_SUBDOMAIN_LENGTH = 63

# String field lengths
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255
MAX_IPV6_LENGTH = 45
MAX_ROLE_LENGTH = 20
MAX_REP_CODE_LENGTH = 50
MAX_FORM_SOURCE_LENGTH = 50
MAX_COLOR_LENGTH = 20
MAX_MIME_TYPE_LENGTH = 100
MAX_TAG_NAME_LENGTH = 100
MAX_COUNTRY_LENGTH = 100

# Integer primary keys are 32-bit signed in the store
MAX_DB_ID = 2_147_483_647

# Password requirements
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
BCRYPT_ROUNDS = 12

# Session settings
SESSION_JTI_LENGTH = 32

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"

# Default white-label branding
DEFAULT_BRAND_NAME = "TradeShow SaaS"
DEFAULT_PRIMARY_COLOR = "#1BD076"
DEFAULT_DARK_COLOR = "#042D23"

# Badge photos are immutable once stored
BADGE_PHOTO_CACHE_CONTROL = "public, max-age=31536000, immutable"

UNKNOWN_CLIENT_VALUE = "unknown"
