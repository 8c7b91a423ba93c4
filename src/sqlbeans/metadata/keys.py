"""Identity keys that address beans and properties inside a graph."""

from pydantic import BaseModel


class BeanKey(BaseModel):
    """Identity of a bean: the schema-qualified table it was built from."""

    schema_name: str
    table_name: str

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.schema_name}.{self.table_name}"


class PropertyKey(BaseModel):
    """Identity of a property: its owning bean plus the column name."""

    bean: BeanKey
    column_name: str

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.bean}.{self.column_name}"
