from .descriptor import Direct, Named, NoParent, ParentRef, TypeDescriptor, UseBase, parent_ref
from .factory import ROOT_ERROR, AbstractError, ErrorTypeMeta, create, recorded_descriptor
from .block import Block

__all__ = [
    "AbstractError",
    "Block",
    "Direct",
    "ErrorTypeMeta",
    "Named",
    "NoParent",
    "ParentRef",
    "ROOT_ERROR",
    "TypeDescriptor",
    "UseBase",
    "create",
    "parent_ref",
    "recorded_descriptor",
]
