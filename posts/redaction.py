"""
Protected-content redaction.

Runs over serialized post projections right before they leave the
service layer. A password-protected post keeps its title and summary
but loses its body unless the caller unlocked it.
"""

from django.conf import settings

PROTECTED_FIELDS = ("content",)


def placeholder() -> str:
    return getattr(settings, "POSTS_REDACTED_PLACEHOLDER", "")


def redact(row: dict, unlocked: bool = False) -> dict:
    """Redact one projection in place and return it."""
    hidden = bool(row.get("need_password")) and not unlocked
    if hidden:
        for name in PROTECTED_FIELDS:
            if name in row:
                row[name] = placeholder()
    row["is_redacted"] = hidden
    return row


def redact_rows(rows) -> list:
    """Redact every projection in a listing; listings are never unlocked."""
    return [redact(row) for row in rows]
