"""Identifier validation shared by commands that take record ids from clients."""

from uuid import UUID

from protean.exceptions import ValidationError


def ensure_identifier(value, field="id", label="id"):
    """Return ``value`` as a string, raising ValidationError if it is not a UUID."""
    if value is None or str(value).strip() == "":
        raise ValidationError({field: [f"{label} is required"]})

    try:
        UUID(str(value))
    except ValueError:
        raise ValidationError({field: [f"Invalid {label}"]}) from None

    return str(value)
