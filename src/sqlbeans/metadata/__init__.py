"""Bean graph entities consumed by code emitters."""

from .bean import Bean
from .bean_property import BeanProperty
from .enum_def import EnumDef
from .foreign_bean_field import ForeignBeanField
from .keys import BeanKey, PropertyKey
from .property_type import BeanPropertyColKey, BeanPropertyType

__all__ = [
    "Bean",
    "BeanKey",
    "BeanProperty",
    "BeanPropertyColKey",
    "BeanPropertyType",
    "EnumDef",
    "ForeignBeanField",
    "PropertyKey",
]
