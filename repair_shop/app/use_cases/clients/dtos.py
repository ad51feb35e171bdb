"""Data Transfer Objects for Client Use Cases"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from repair_shop.domain.client import Client


class CreateClientCommandDTO(BaseModel):
    """Command DTO for registering a client"""

    name: str = Field(..., min_length=1, description="Full name")
    phone: str = Field(..., min_length=1, description="Contact phone")
    document_type: Optional[str] = Field(default=None, description="Document type (CC, NIT, CE, ...)")
    document_number: Optional[str] = Field(default=None, description="Document number")
    email: Optional[str] = Field(default=None, description="Contact email")
    address: Optional[str] = Field(default=None, description="Postal address")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "José Martínez",
                "phone": "3001234567",
                "document_type": "CC",
                "document_number": "1020304050",
                "email": "jose@example.com"
            }
        }


class ClientDTO(BaseModel):
    id: str
    name: str
    phone: str
    document_type: Optional[str] = None
    document_number: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, client: Client) -> "ClientDTO":
        return cls(
            id=client.id,
            name=client.name,
            phone=client.phone,
            document_type=client.document_type,
            document_number=client.document_number,
            email=client.email,
            address=client.address,
            created_at=client.created_at,
        )


class SearchClientsResponseDTO(BaseModel):
    query: str
    clients: List[ClientDTO]
    count: int
