"""Text document schemas.

A text is one markdown file (song, reading, announcement) whose body is
split into slides on blank lines.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class TextMeta(BaseModel):
    """YAML front matter of a text file."""

    schema_version: Literal[1] = 1
    id: str = Field(..., min_length=1, description="Stable identifier, also the filename suffix")
    title: str = Field(..., min_length=1)
    description: str = ""
    categories: list[str] = Field(default_factory=list)
    domain: str = Field(
        default="",
        description="Folder the text lives in (songs, readings, ...)",
    )


class TextDoc(BaseModel):
    """A parsed text document."""

    meta: TextMeta
    content_raw: str = Field(default="", description="Body without front matter")
    slides: list[str] = Field(default_factory=list)

    # Convenience accessors matching the player's content contract
    @property
    def id(self) -> str:
        return self.meta.id

    @property
    def title(self) -> str:
        return self.meta.title


class TextSummary(BaseModel):
    """Lightweight listing entry."""

    id: str
    title: str
    domain: str
    categories: list[str] = Field(default_factory=list)
    slide_count: int
    reference: str = Field(..., description="domain/slug__id reference for scenarios")


class CreateTextRequest(BaseModel):
    domain: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    content: str = ""
    description: str = ""
    categories: list[str] = Field(default_factory=list)


class UpdateTextRequest(BaseModel):
    """Partial update; unset fields are left unchanged."""

    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None
    description: Optional[str] = None
    categories: Optional[list[str]] = None


class CreateDomainRequest(BaseModel):
    name: str = Field(..., min_length=1)
