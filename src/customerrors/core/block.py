"""customerrors.core.block
========================
A :class:`Block` declares many related error classes from one mapping.

Entries are materialized through :func:`~customerrors.core.factory.create`
either eagerly (on construction) or lazily (on first :meth:`Block.get`).
Resolved classes live in a private cache, never on the block itself, so a
declared name can not collide with the block's own methods.

Accepted declarations::

    errors = Block(
        {
            "NotFound": [True, "missing"],          # [parent, message, abstract]
            "Invalid": ["NotFound", "bad input"],   # parent named in the block
            "Timeout": {"default_message": "too slow", "abstract": False},
            "Fatal": False,                         # bare parent reference
            "Lookup": KeyError,                     # alias of an existing class
        },
        namespace="api",
        lazy=True,
    )
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, NoReturn, Optional, Union

from ..config import CustomErrorsSettings, settings as default_settings
from ..exceptions import CircularReference, ErrorNotFound
from .descriptor import Direct, Named, NoParent, UseBase, parent_ref
from .factory import ROOT_ERROR, create

__all__ = ["Block"]

logger = logging.getLogger(__name__)

BaseRef = Union[str, type]


class Block:
    """Named, cached registry of error classes sharing a namespace and base."""

    ErrorNotFound = ErrorNotFound
    CircularReference = CircularReference

    def __init__(
        self,
        errors: Mapping[str, Any],
        namespace: Optional[str] = None,
        base: Any = None,
        lazy: Optional[bool] = None,
        *,
        settings: Optional[CustomErrorsSettings] = None,
    ) -> None:
        cfg = settings or default_settings
        if base is None or base is True:
            base = cfg.DEFAULT_BASE
        elif base is False:
            base = ROOT_ERROR
        elif not (isinstance(base, type) and issubclass(base, BaseException)):
            base = str(base)

        self._errors = errors
        self._namespace = namespace
        self._prefix = f"{namespace}." if namespace else ""
        self._base: BaseRef = base
        self._lazy = cfg.LAZY if lazy is None else bool(lazy)
        self._detect_cycles = cfg.DETECT_CYCLES
        self._cache: dict[str, type] = {}
        self._resolving: list[str] = []
        self._created = False

        if not self._lazy:
            self.create_all()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get(self, name: str) -> type:
        """Return the error class declared as ``name``, creating it if needed.

        Raises:
            ErrorNotFound: ``name`` is neither declared nor the base name, or
                its parent reference can not be resolved.
            CircularReference: string parent references loop back to ``name``.
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        full_name = self._prefix + name
        if name not in self._errors:
            if self._base == name:
                return self.get_base()
            raise ErrorNotFound(full_name)

        if self._detect_cycles and name in self._resolving:
            loop = self._resolving[self._resolving.index(name):] + [name]
            raise CircularReference(
                full_name, tuple(self._prefix + n for n in loop)
            )

        self._resolving.append(name)
        try:
            resolved = self._resolve(full_name, self._errors[name])
        finally:
            self._resolving.pop()

        self._cache[name] = resolved
        logger.debug("Resolved %s -> %r", full_name, resolved)
        return resolved

    def raise_(self, name: str, message: Optional[str] = None) -> NoReturn:
        """Raise an instance of ``name`` built with ``message``."""
        error_type = self.get(name)
        raise error_type(message)

    def create_all(self) -> None:
        """Resolve every declared entry; later calls are no-ops."""
        if self._created:
            return
        for name in self._errors:
            self.get(name)
        self._created = True
        logger.debug(
            "Created all %d errors of block %r", len(self._errors), self._namespace
        )

    def get_base(self) -> type:
        """Common base class of the block, created abstract on first use."""
        base = self._base
        if isinstance(base, str):
            base_name = base
            base = create(self._prefix + base_name, ROOT_ERROR, "", True)
            if base_name not in self._errors:
                # A declared entry of the same name keeps its own cache slot.
                self._cache.setdefault(base_name, base)
            self._base = base
            logger.debug("Created base %s", base.name)
        return base

    def names(self) -> list[str]:
        """Declared entry names, in declaration order."""
        return list(self._errors)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def namespace(self) -> Optional[str]:
        return self._namespace

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def base(self) -> BaseRef:
        """Base reference: a name until :meth:`get_base` runs, then a class."""
        return self._base

    @property
    def lazy(self) -> bool:
        return self._lazy

    @property
    def created(self) -> bool:
        return self._created

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __getitem__(self, name: str) -> type:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._errors or name in self._cache or self._base == name

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return (
            f"<Block namespace={self._namespace!r} errors={len(self._errors)} "
            f"resolved={len(self._cache)} created={self._created}>"
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _resolve(self, full_name: str, declared: Any) -> type:
        params: dict[str, Any] = {"name": full_name}
        if isinstance(declared, (list, tuple)):
            ref, default_message, abstract = (list(declared) + [None, None, False])[:3]
            params["default_message"] = default_message
            params["abstract"] = bool(abstract)
        elif isinstance(declared, Mapping):
            params.update(declared)
            params["name"] = full_name
            ref = declared.get("parent", True)
        else:
            ref = declared
            if isinstance(parent_ref(ref), Direct):
                # A bare class is an alias, not a new type.
                return ref

        reference = parent_ref(ref)
        if isinstance(reference, Direct):
            params["parent"] = reference.error_type
        elif isinstance(reference, UseBase):
            params["parent"] = self.get_base()
        elif isinstance(reference, NoParent):
            params["parent"] = None
        elif isinstance(reference, Named):
            params["parent"] = self.get(reference.name)
        else:
            raise ErrorNotFound(full_name)
        return create(params)
