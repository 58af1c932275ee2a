import hashlib
import secrets


API_KEY_BYTES = 32
BEARER_PREFIX = "Bearer "


def generate_api_key() -> str:
    return secrets.token_hex(API_KEY_BYTES)


def hash_api_key(raw_key: str) -> str:
    """Return the hex SHA-256 digest stored in ``api_keys.key_hash``.

    The raw key itself is never persisted, so every lookup goes through this
    function first.
    """
    return hashlib.sha256(raw_key.encode("utf-8")).hexdigest()


def extract_api_key(authorization: str) -> str:
    """Strip an optional ``Bearer`` scheme from an Authorization header value."""
    if authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):]
    return authorization
