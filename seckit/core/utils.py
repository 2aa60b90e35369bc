"""
Utility helpers for seckit.
"""


def mask_email(email: str) -> str:
    """
    Mask the local part of an email address for display.

    Example::

        >>> mask_email("john@example.com")
        "jo***@example.com"
        >>> mask_email("a@test.com")
        "a***@test.com"

    Args:
        email: Address to mask.

    Returns:
        Masked address, or *email* unchanged if it is not ``name@domain``.
    """
    parts = email.split("@")
    if len(parts) != 2 or not parts[0]:
        return email

    name, domain = parts
    if len(name) <= 2:
        return f"{name[0]}***@{domain}"
    return f"{name[:2]}***@{domain}"
