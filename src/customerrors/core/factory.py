"""customerrors.core.factory
==========================
Build throwable error classes from :class:`TypeDescriptor` records.

Every generated class keeps its *resolved* descriptor at ``cls.descriptor``.
Default message and construction routine are copied from the parent's
descriptor exactly once, when the class is created; later changes to a
parent never leak into existing children.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .descriptor import ConstructFn, TypeDescriptor

__all__ = [
    "ROOT_ERROR",
    "ErrorTypeMeta",
    "create",
    "recorded_descriptor",
    "AbstractError",
]

logger = logging.getLogger(__name__)

#: Parent used when a descriptor does not name one.
ROOT_ERROR: type[BaseException] = Exception

# Instance key tracking which class's routine is currently running, so
# ``parent()`` chains relative to it instead of to ``type(self)``.
_CONSTRUCTING = "_constructing_type"


class ErrorTypeMeta(type):
    """Metaclass of generated error classes; gives them a readable repr."""

    def __repr__(cls) -> str:
        return f"[Error class {cls.__dict__.get('name', cls.__qualname__)}]"


def recorded_descriptor(error_type: Any) -> Optional[TypeDescriptor]:
    """Descriptor stored on a generated class, ``None`` for foreign classes."""
    recorded = getattr(error_type, "descriptor", None)
    return recorded if isinstance(recorded, TypeDescriptor) else None


def _resolve_defaults(descriptor: TypeDescriptor) -> TypeDescriptor:
    parent = descriptor.parent or ROOT_ERROR
    inherited = recorded_descriptor(parent)
    default_message = descriptor.default_message
    if default_message is None and inherited is not None:
        default_message = inherited.default_message
    construct = descriptor.construct_fn
    if construct is None and inherited is not None:
        construct = inherited.construct_fn
    return descriptor.model_copy(
        update={
            "parent": parent,
            "default_message": default_message,
            "construct_fn": construct,
        }
    )


def _construct_owner(error_type: type) -> type:
    """Topmost class up the chain sharing ``error_type``'s routine."""
    owner = error_type
    while True:
        own = recorded_descriptor(owner)
        above = recorded_descriptor(own.parent) if own else None
        if above is None or above.construct_fn is not own.construct_fn:
            return owner
        owner = own.parent


def _chain_to_parent(self: BaseException, *args: Any, **kwargs: Any) -> None:
    """Run the nearest ancestor's construction routine on this instance."""
    current = self.__dict__.get(_CONSTRUCTING, type(self))
    own = recorded_descriptor(_construct_owner(current))
    if own is None:
        return
    ancestor = own.parent
    inherited = recorded_descriptor(ancestor)
    if inherited is None or inherited.construct_fn is None:
        return
    self.__dict__[_CONSTRUCTING] = ancestor
    try:
        inherited.construct_fn(self, *args, **kwargs)
    finally:
        if current is type(self):
            self.__dict__.pop(_CONSTRUCTING, None)
        else:
            self.__dict__[_CONSTRUCTING] = current


def _message_str(self: BaseException) -> str:
    message = getattr(self, "message", "")
    return "" if message is None else str(message)


def _inherit(
    cls: type,
    name: Union[str, TypeDescriptor, Mapping[str, Any]],
    default_message: Optional[str] = None,
    abstract: bool = False,
    construct: Optional[ConstructFn] = None,
) -> type:
    """Create a new error class whose parent is ``cls``."""
    if isinstance(name, (TypeDescriptor, Mapping)):
        descriptor = TypeDescriptor.coerce(name).model_copy(update={"parent": cls})
        return create(descriptor)
    return create(name, cls, default_message, abstract, construct)


def _build(descriptor: TypeDescriptor) -> type:
    name = descriptor.name
    parent = descriptor.parent
    abstract = descriptor.abstract
    construct = descriptor.construct_fn

    def __init__(self: BaseException, *args: Any, **kwargs: Any) -> None:
        # The parent's own __init__ is skipped; keyword fields of foreign
        # parents (ImportError.name, OSError.errno, ...) are left unset.
        BaseException.__init__(self, *args)
        if abstract and type(self) is cls:
            raise AbstractError(name)
        if construct is not None:
            construct(self, *args, **kwargs)
        elif args and args[0] is not None:
            self.message = args[0]

    meta = ErrorTypeMeta if issubclass(ErrorTypeMeta, type(parent)) else type(parent)
    cls = meta(
        name.rsplit(".", 1)[-1],
        (parent,),
        {
            "__init__": __init__,
            "__str__": _message_str,
            "__module__": "customerrors",
            "__qualname__": name,
            "descriptor": descriptor,
            "name": name,
            "default_message": descriptor.default_message,
            "message": descriptor.default_message or "",
            "abstract": abstract,
            "construct": staticmethod(construct) if construct else None,
            "parent_type": parent,
            "parent": _chain_to_parent,
            "inherit": classmethod(_inherit),
        },
    )
    return cls


def create(
    name: Union[str, TypeDescriptor, Mapping[str, Any]],
    parent: Optional[type[BaseException]] = None,
    default_message: Optional[str] = None,
    abstract: bool = False,
    construct: Optional[ConstructFn] = None,
) -> type:
    """Create a custom error class.

    Accepts either positional arguments or a single descriptor (a
    :class:`TypeDescriptor` or an equivalent mapping with the keys ``name``,
    ``parent``, ``default_message``, ``abstract`` and ``construct``).

    * ``parent`` defaults to :data:`ROOT_ERROR`.
    * A missing ``default_message`` or ``construct`` is taken from the
      parent's recorded descriptor.
    * Instantiating an ``abstract`` class raises :data:`AbstractError`.
    """
    if isinstance(name, (TypeDescriptor, Mapping)):
        descriptor = TypeDescriptor.coerce(name)
    else:
        descriptor = TypeDescriptor(
            name=name,
            parent=parent,
            default_message=default_message,
            abstract=abstract,
            construct=construct,
        )
    resolved = _resolve_defaults(descriptor)
    cls = _build(resolved)
    logger.debug(
        "Created error class %s (parent=%s, abstract=%s)",
        resolved.name,
        getattr(resolved.parent, "__qualname__", resolved.parent),
        resolved.abstract,
    )
    return cls


def _abstract_construct(self: BaseException, errorname: str) -> None:
    self.errorname = errorname
    self.message = f"Error {errorname} is abstract"


#: Raised on any attempt to instantiate an abstract error class.
AbstractError = create(
    name="customErrors.AbstractError",
    construct=_abstract_construct,
)
