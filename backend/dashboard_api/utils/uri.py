"""Connection-string helpers."""

import re

_CREDENTIALS = re.compile(r"mongodb(\+srv)?://([^:@/]+):([^@/]+)@")


def mask_mongo_uri(uri: str) -> str:
    """Hide the username and password of a MongoDB URI for logging.

    Args:
        uri: A ``mongodb://`` or ``mongodb+srv://`` connection string.

    Returns:
        The URI with credentials replaced by ``***:***``. URIs without
        credentials are returned unchanged.
    """
    return _CREDENTIALS.sub(lambda m: f"mongodb{m.group(1) or ''}://***:***@", uri)
