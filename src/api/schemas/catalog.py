"""Pydantic schemas for catalog autocomplete."""

from pydantic import BaseModel


class CatalogEntryResponse(BaseModel):
    """One autocomplete candidate."""

    frontend_id: str
    title: str
    title_slug: str
    difficulty: str
    tags: list[str]
    url: str

    class Config:
        from_attributes = True
