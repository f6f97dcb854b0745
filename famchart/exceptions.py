"""Error taxonomy for the chart core.

Only caller programming errors raise. Lookups of unknown node ids,
undersized selections and empty undo/redo stacks are treated as
"nothing to do" and return quietly instead.
"""


class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing or malformed."""
    pass


def require(value, name: str):
    """Return ``value`` unchanged, or raise if it is None.

    Args:
        value: Argument to check
        name: Parameter name used in the error message

    Returns:
        The value itself

    Raises:
        InvalidArgumentError: If value is None
    """
    if value is None:
        raise InvalidArgumentError(f"'{name}' must not be None")
    return value


__all__ = ["InvalidArgumentError", "require"]
