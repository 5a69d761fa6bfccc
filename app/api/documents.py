from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import action_failed
from app.api.employees import document_to_out
from app.core.context import AppContext
from app.core.security import get_current_user, require_online
from app.schemas.document import DocumentCreate, DocumentOut

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("", response_model=DocumentOut, status_code=status.HTTP_201_CREATED)
async def create_document(
    body: DocumentCreate,
    ctx: AppContext = Depends(require_online),
    _: dict = Depends(get_current_user),
):
    """Registers the document metadata; the file itself is uploaded elsewhere."""
    if ctx.get_employee(body.employee_id) is None:
        raise HTTPException(status_code=404, detail="Employee not found")
    saved = await ctx.add_document(body.model_dump(mode="json"))
    if saved is None:
        raise action_failed(ctx)
    return document_to_out(saved)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: str,
    ctx: AppContext = Depends(require_online),
    _: dict = Depends(get_current_user),
):
    exists = await ctx.document_exists(document_id)
    if exists is None:
        raise action_failed(ctx)
    if not exists:
        raise HTTPException(status_code=404, detail="Document not found")
    if not await ctx.delete_document(document_id):
        raise action_failed(ctx)
