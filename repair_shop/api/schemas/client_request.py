"""Request schemas for Clients API"""

from typing import Optional
from pydantic import BaseModel, Field


class CreateClientRequestSchema(BaseModel):
    """
    Request schema for registering a client

    Used for POST /clients endpoint.
    """

    name: str = Field(..., min_length=1, description="Full name")
    phone: str = Field(..., min_length=1, description="Contact phone")
    document_type: Optional[str] = Field(default=None, description="CC, NIT, CE, ...")
    document_number: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None)
    address: Optional[str] = Field(default=None)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "José Martínez",
                "phone": "3001234567",
                "document_type": "CC",
                "document_number": "1020304050"
            }
        }
