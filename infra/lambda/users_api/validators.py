import re

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def is_email(email) -> bool:
    """Return True if ``email`` looks like ``local@domain.tld``.

    Syntax only, no DNS lookup.
    """
    if not isinstance(email, str):
        return False
    return EMAIL_RE.fullmatch(email) is not None
