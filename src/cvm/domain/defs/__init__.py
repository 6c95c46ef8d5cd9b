"""Domain definition exports."""

from .ability_def import AbilityTemplateDef
from .avatar_def import AvatarDef
from .class_def import ClassDef, UltimateStyle
from .element_def import ElementDef
from .monster_def import MonsterDef
from .name_pool_def import NamePoolDef

__all__ = [
    "AbilityTemplateDef",
    "AvatarDef",
    "ClassDef",
    "ElementDef",
    "MonsterDef",
    "NamePoolDef",
    "UltimateStyle",
]
