from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

class GreetingRequest(BaseModel):
    """Greeting input, read from the query string"""
    name: Optional[str] = Field(None, description="Name to greet; blank or absent means World")

class GreetingResponse(BaseModel):
    message: str

class SumRequest(BaseModel):
    """Operands for the sum endpoint"""
    a: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX, description="First operand")
    b: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX, description="Second operand")

    @field_validator("a", "b", mode="before")
    @classmethod
    def default_unreadable_to_zero(cls, value: Any) -> int:
        # null, booleans, and anything int() cannot read count as 0
        if value is None or isinstance(value, bool):
            return 0
        if isinstance(value, int):
            return value
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError):
            return 0

class SumResponse(BaseModel):
    result: int
