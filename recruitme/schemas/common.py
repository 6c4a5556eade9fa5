"""
Small response payloads shared by every router.
"""
from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    message: str = Field(..., description="Human-readable outcome")


class IdResponse(BaseModel):
    id: str = Field(..., description="Identifier of the created resource")


class CreatedResponse(IdResponse):
    message: str = Field(..., description="Human-readable outcome")
