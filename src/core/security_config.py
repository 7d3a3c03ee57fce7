"""Security configuration constants for the Ask Gemini server.

This module centralizes:
- Sensitive keys that should be sanitized from logs
- Which error response fields each environment may expose
"""

# Keys redacted from structured log extras. Prompts are user content and are
# treated the same as credentials.
SENSITIVE_KEYS: set[str] = {
    # Credentials
    "api_key",
    "x-goog-api-key",
    "secret",
    "token",
    "authorization",
    "bearer",
    "password",
    "cookie",
    "set-cookie",
    # User content
    "prompt",
    "contents",
}

# In production, error responses should only contain these fields
PRODUCTION_ERROR_FIELDS: set[str] = {
    "correlation_id",
    "type",
}

DEVELOPMENT_ERROR_FIELDS: set[str] = PRODUCTION_ERROR_FIELDS | {
    "details",
    "traceback",
    "exception_type",
}


def get_allowed_error_fields(environment: str) -> set[str]:
    """Get allowed error response fields based on environment."""
    if environment == "production":
        return PRODUCTION_ERROR_FIELDS.copy()
    return DEVELOPMENT_ERROR_FIELDS.copy()


def is_sensitive_key(key: str) -> bool:
    """Check if a key should be considered sensitive and redacted.

    Matching is case-insensitive and by substring.
    """
    key_lower = key.lower()
    return any(sensitive in key_lower for sensitive in SENSITIVE_KEYS)
