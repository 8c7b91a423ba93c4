from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .bean_property import BeanProperty
from .foreign_bean_field import ForeignBeanField
from .keys import BeanKey


class Bean(BaseModel):
    """Typed record synthesized from one database table."""

    key: BeanKey
    comment: Optional[str] = None
    properties: List[BeanProperty] = Field(default_factory=list)
    foreign_fields: List[ForeignBeanField] = Field(default_factory=list)
    col_names_by_unique_constraint_name: Dict[str, List[str]] = Field(default_factory=dict)

    model_config = {"frozen": False}

    @property
    def sql_database(self) -> str:
        return self.key.schema_name

    @property
    def sql_table(self) -> str:
        return self.key.table_name

    def get_property(self, column_name: str) -> Optional[BeanProperty]:
        """Return the property materialized for ``column_name``, if any."""
        for prop in self.properties:
            if prop.sql_name == column_name:
                return prop
        return None
