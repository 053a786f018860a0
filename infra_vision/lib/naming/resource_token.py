import base64
import hashlib

RESOURCE_TOKEN_LENGTH = 13


def resource_token(*parts: str) -> str:
    """Generate a deterministic suffix for globally unique resource names

    The token only contains lower-case letters and the digits 2-7, so it is safe to use in storage account names.

    :param parts: Values identifying the deployment, usually subscription id, environment name and location
    :return: A 13 character token
    """
    digest = hashlib.sha256("|".join(p.lower() for p in parts).encode("utf-8")).digest()
    return base64.b32encode(digest).decode("ascii").lower()[:RESOURCE_TOKEN_LENGTH]
