"""
Utility functions for the Cognito auth package.
"""

import base64
import hashlib
import hmac


def secret_hash(username: str, client_id: str, client_secret: str) -> str:
    """
    Return the SecretHash Cognito expects from app clients that have a secret.

    The value is Base64(HMAC-SHA256(key=client_secret, msg=username + client_id)).
    """
    digest = hmac.new(
        client_secret.encode("utf-8"),
        (username + client_id).encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")
