from __future__ import annotations

"""customerrors.core.descriptor
==============================
Passive records consumed by the error factory and by :class:`Block`.

* :class:`TypeDescriptor` – identity and behaviour of one error type.
* Parent references – a small tagged union describing *how* a declared
  error finds its parent inside a block.
"""

from typing import Any, Callable, Mapping, Optional, Union

from pydantic import BaseModel, Field, field_validator

__all__ = [
    "TypeDescriptor",
    "NoParent",
    "UseBase",
    "Named",
    "Direct",
    "ParentRef",
    "parent_ref",
]

ConstructFn = Callable[..., Any]


class TypeDescriptor(BaseModel):
    """Declarative record describing one error type before it exists."""

    name: str = Field(..., description="Fully-qualified display name")
    parent: Optional[type[BaseException]] = Field(
        default=None, description="Parent error class (root error if omitted)"
    )
    default_message: Optional[str] = Field(
        default=None, description="Message used when none is passed"
    )
    abstract: bool = Field(
        default=False, description="Direct instantiation is forbidden"
    )
    construct_fn: Optional[ConstructFn] = Field(
        default=None,
        alias="construct",
        description="Custom routine run with the constructor's arguments",
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "populate_by_name": True,
    }

    @field_validator("construct_fn", mode="before")
    @classmethod
    def _drop_non_callable(cls, v: Any) -> Optional[ConstructFn]:
        # Anything that is not callable counts as "not supplied".
        return v if callable(v) else None

    @field_validator("abstract", mode="before")
    @classmethod
    def _truthy(cls, v: Any) -> bool:
        return bool(v)

    @classmethod
    def coerce(cls, value: Union["TypeDescriptor", Mapping[str, Any]]) -> "TypeDescriptor":
        """Accept either a descriptor or the single-mapping form."""
        if isinstance(value, cls):
            return value
        return cls.model_validate(dict(value))


# ---------------------------------------------------------------------------
# Parent references
# ---------------------------------------------------------------------------


class NoParent(BaseModel):
    """No explicit parent; the factory falls back to the root error."""

    model_config = {"frozen": True}


class UseBase(BaseModel):
    """Parent is the block's common base type."""

    model_config = {"frozen": True}


class Named(BaseModel):
    """Parent is another entry of the same block, looked up by name."""

    name: str

    model_config = {"frozen": True}


class Direct(BaseModel):
    """Parent is an already existing error class."""

    error_type: type[BaseException]

    model_config = {"frozen": True}


ParentRef = Union[NoParent, UseBase, Named, Direct]


def parent_ref(value: Any) -> Optional[ParentRef]:
    """Classify a raw parent reference; ``None`` if it cannot be resolved."""
    if isinstance(value, type) and issubclass(value, BaseException):
        return Direct(error_type=value)
    if value is None or value is False:
        return NoParent()
    if value is True:
        return UseBase()
    if isinstance(value, str):
        return Named(name=value)
    return None
