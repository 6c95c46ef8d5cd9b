"""Repository exports."""

from .avatars_repo import AvatarsRepository
from .classes_repo import ClassesRepository
from .elements_repo import ElementsRepository
from .monsters_repo import MonstersRepository
from .name_pools_repo import NamePoolsRepository

__all__ = [
    "AvatarsRepository",
    "ClassesRepository",
    "ElementsRepository",
    "MonstersRepository",
    "NamePoolsRepository",
]
