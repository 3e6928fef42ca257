"""Text API routes.

Texts are markdown files grouped in domain folders (songs, readings, ...).
Each text is split into slides on blank lines.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from src.texts.parser import make_text_reference
from src.texts.registry import get_text_registry
from src.texts.schemas import (
    CreateDomainRequest,
    CreateTextRequest,
    TextSummary,
    UpdateTextRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/texts", tags=["texts"])


def _text_payload(doc) -> dict:
    return {**doc.model_dump(), "reference": make_text_reference(doc)}


@router.get("", response_model=list[TextSummary])
async def list_texts(
    domain: Optional[str] = Query(None, description="Filter by domain"),
) -> list[TextSummary]:
    """List all texts with optional domain filter."""
    return get_text_registry().list_summaries(domain)


@router.get("/domains", response_model=list[str])
async def list_domains() -> list[str]:
    """List domain folders."""
    return get_text_registry().list_domains()


@router.post("/domains", status_code=201)
async def create_domain(body: CreateDomainRequest):
    """Create a domain folder."""
    try:
        get_text_registry().create_domain(body.name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"created": body.name}


@router.post("/reload")
async def reload_texts():
    """Force reload all texts from disk."""
    registry = get_text_registry()
    registry.reload()
    return {"status": "reloaded", "count": registry.count()}


@router.get("/{text_id}")
async def get_text(text_id: str):
    """Get a text with its slides."""
    doc = get_text_registry().find_by_id(text_id)
    if doc is None:
        raise HTTPException(status_code=404, detail=f"Text not found: {text_id}")
    return _text_payload(doc)


@router.post("", status_code=201)
async def create_text(body: CreateTextRequest):
    """Create a new text in a domain."""
    try:
        doc = get_text_registry().create(
            domain=body.domain,
            title=body.title,
            content=body.content,
            description=body.description,
            categories=body.categories,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _text_payload(doc)


@router.put("/{text_id}")
async def update_text(text_id: str, body: UpdateTextRequest):
    """Update title, content, description or categories of a text."""
    doc = get_text_registry().update(
        text_id,
        title=body.title,
        content=body.content,
        description=body.description,
        categories=body.categories,
    )
    if doc is None:
        raise HTTPException(status_code=404, detail=f"Text not found: {text_id}")
    return _text_payload(doc)


@router.delete("/{text_id}")
async def delete_text(text_id: str):
    """Delete a text file."""
    if not get_text_registry().delete(text_id):
        raise HTTPException(status_code=404, detail=f"Text not found: {text_id}")
    return {"deleted": text_id}
