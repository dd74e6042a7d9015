"""Errors raised and reported while reading and writing tags."""

from __future__ import annotations


class ResourceListingError(RuntimeError):
    """Resources or the account identity could not be listed."""


def report_error(error: BaseException | None) -> bool:
    """Print ``error`` if there is one; return whether there was one."""
    if error is None:
        return False
    print(str(error))
    return True