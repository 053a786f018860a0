from typing import Optional


def derive_name(explicit: Optional[str], abbreviation: str, token: str) -> str:
    """Pick the explicitly configured name, or derive one from an abbreviation and a token

    :param explicit: Configured name, blank values count as unset
    :param abbreviation: Prefix for the resource kind
    :param token: Resource token or other suffix
    :return: The resource name
    """
    if explicit and explicit.strip():
        return explicit.strip()

    return f"{abbreviation}{token}"
