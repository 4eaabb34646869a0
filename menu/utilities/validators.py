"""
Request and response schemas for the JSON API.

Category names are kept verbatim: matching against recipes is exact, so no
whitespace normalisation happens here.
"""
from pydantic import BaseModel, Field
from typing import Optional


class CategoryChoice(BaseModel):
    """Body of PUT /api/category."""
    category: str = Field(..., max_length=200)


class RandomizeRequest(BaseModel):
    """Body of POST /api/randomize; a category, when given, is selected before drawing."""
    category: Optional[str] = Field(default=None, max_length=200)


class RandomizeResult(BaseModel):
    result: Optional[str]
    id: Optional[str] = None
    category: Optional[str] = None
    meal_type: Optional[str] = None
    bucket: str
