from typing import Optional

from pydantic import BaseModel

from .enum_def import EnumDef
from .keys import BeanKey, PropertyKey
from .property_type import BeanPropertyColKey, BeanPropertyType


class BeanProperty(BaseModel):
    """One column of a table, represented as a typed field on a bean.

    Attributes:
        key: Identity of this property within the graph.
        belongs_to_bean: Key of the owning bean; resolve it through the graph.
        default_value: Normalized default literal, or None when the column has none.
        enum: Synthesized enum for enum- and set-typed columns.
    """

    key: PropertyKey
    sql_name: str
    sql_comment: str = ""
    belongs_to_bean: BeanKey
    is_nullable: bool = False
    is_generated: bool = False
    property_type: BeanPropertyType = BeanPropertyType.OBJECT
    column_key: Optional[BeanPropertyColKey] = None
    default_value: Optional[str] = None
    enum: Optional[EnumDef] = None

    model_config = {"frozen": False}

    @property
    def is_primary_key(self) -> bool:
        return self.column_key is BeanPropertyColKey.PRI
