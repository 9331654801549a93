"""
Built-in error types for customerrors.
All of them are produced by the factory itself and fail fast.
"""

from __future__ import annotations

from .core.factory import AbstractError, create

__all__ = [
    "AbstractError",
    "ErrorNotFound",
    "CircularReference",
]


def _not_found(self: BaseException, errorname: str) -> None:
    self.errorname = errorname
    self.message = f"Error {errorname} is not found in block"


def _circular(self: BaseException, errorname: str, chain: tuple[str, ...] = ()) -> None:
    self.parent(errorname)
    self.chain = tuple(chain)
    self.message = (
        f"Error {errorname} has a circular parent reference: "
        + " -> ".join(self.chain)
    )


#: Requested error is not declared in a block (or cannot be resolved).
ErrorNotFound = create(
    name="customErrors.ErrorNotFound",
    construct=_not_found,
)

#: String parent references inside a block loop back on themselves.
CircularReference = ErrorNotFound.inherit(
    {
        "name": "customErrors.CircularReference",
        "construct": _circular,
    }
)
