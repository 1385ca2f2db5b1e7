"""Precondition checks run before any publishing API call.

Checks are ordered; the first missing value raises and nothing else is
inspected.
"""

from __future__ import annotations

from typing import Any

from content_publisher.errors import ContentIdMissingError, ValidationError

PATH_RESERVATION_MESSAGE = "The destination or path isn't supplied"


def is_blank(value: Any) -> bool:
    """True for None, and for strings that are empty or only whitespace."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _missing(field: str) -> ValidationError:
    return ValidationError(f"The {field} isn't supplied")


def require_content_id(content_id: str | None) -> None:
    if is_blank(content_id):
        raise ContentIdMissingError()


def require_path_reservation(base_path: str | None, publishing_app: str | None) -> None:
    # Either value missing gets the same message.
    if is_blank(base_path) or is_blank(publishing_app):
        raise ValidationError(PATH_RESERVATION_MESSAGE)


def require_answer_fields(
    base_path: str | None,
    *,
    publishing_app: str | None,
    title: str | None,
    content: str | None,
) -> None:
    """Validate the fields every standalone content item needs."""
    if is_blank(base_path):
        raise _missing("base path")
    for field, value in (
        ("publishing_app", publishing_app),
        ("title", title),
        ("content", content),
    ):
        if is_blank(value):
            raise _missing(field)


def require_transaction_fields(
    base_path: str | None,
    *,
    publishing_app: str | None,
    title: str | None,
    content: str | None,
    link: str | None,
) -> None:
    """Validate answer fields, then the transaction start link."""
    require_answer_fields(base_path, publishing_app=publishing_app, title=title, content=content)
    if is_blank(link):
        raise _missing("link")


def require_page_fields(
    content_id: str | None, *, base_path: str | None, title: str | None
) -> None:
    """Validate a presenter's id and the payload fields it always needs."""
    require_content_id(content_id)
    if is_blank(base_path):
        raise _missing("base path")
    if is_blank(title):
        raise _missing("title")
