from sqlmodel import SQLModel


class BaseModel(SQLModel):
    """Base class for domain models and table mappings"""
    pass
