from typing import List

from pydantic import BaseModel, Field


class EnumDef(BaseModel):
    """Enum synthesized from an enum- or set-typed column."""

    name: str
    values: List[str] = Field(default_factory=list)
    sql_comment: str = ""

    model_config = {"frozen": False}
