"""Client-side models for server entities and request descriptors."""

from paraclient.domain.model.constraint import Constraint
from paraclient.domain.model.pager import Pager
from paraclient.domain.model.para_object import ParaObject

__all__ = [
    "ParaObject",
    "Pager",
    "Constraint",
]
