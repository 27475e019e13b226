"""Pydantic schemas describing CLI output records."""

from pydantic import BaseModel, Field

from kana import Operation


class ConversionRecord(BaseModel):
    """One converted line."""

    index: int = Field(ge=0)
    operation: Operation
    phonetic: bool = False
    source: str = Field(alias="in")
    result: str = Field(alias="out")

    model_config = {"populate_by_name": True, "use_enum_values": True}
