"""Item models"""

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """A named, priced unit offered for purchase"""
    model_config = ConfigDict(frozen=True)

    name: str
    unit_price: int = Field(ge=0)
