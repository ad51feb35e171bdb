from datetime import datetime, timezone
from uuid import uuid4
from sqlmodel import SQLModel


def generate_uuid() -> str:
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive values read back from backends that drop the offset"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class BaseModel(SQLModel):
    """Base class for all persisted entities"""
