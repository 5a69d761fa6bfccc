from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import action_failed, get_context
from app.core.context import AppContext
from app.core.formatting import format_brl, format_date_br
from app.core.security import get_current_user, require_online
from app.schemas.document import DocumentOut
from app.schemas.employee import (
    EmployeeCreate,
    EmployeeListItem,
    EmployeeOut,
    EmployeeStatusUpdate,
    EmployeeUpdate,
)
from app.schemas.event import EventOut
from app.schemas.pagination import EmployeePage, PaginationMeta

router = APIRouter(prefix="/employees", tags=["employees"])


def employee_to_out(row: dict) -> EmployeeOut:
    return EmployeeOut(
        **{**row, "id": str(row["id"])},
        salary_display=format_brl(row.get("salary")),
        admission_date_display=format_date_br(row.get("admission_date")),
    )


def employee_to_list_item(row: dict) -> EmployeeListItem:
    return EmployeeListItem(
        id=str(row["id"]),
        name=row["name"],
        cpf=row.get("cpf"),
        role=row.get("role"),
        status=row["status"],
        admission_date=row.get("admission_date"),
    )


def event_to_out(row: dict) -> EventOut:
    return EventOut(**{**row, "id": str(row["id"]), "employee_id": str(row["employee_id"])})


def document_to_out(row: dict) -> DocumentOut:
    return DocumentOut(**{**row, "id": str(row["id"]), "employee_id": str(row["employee_id"])})


def _get_or_404(ctx: AppContext, employee_id: str) -> dict:
    employee = ctx.get_employee(employee_id)
    if employee is None:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


@router.get("")
def list_employees(
    search: str | None = Query(default=None, description="Search by name or CPF"),
    status_filter: str | None = Query(default=None, alias="status", description="Ativo, Afastado, Desligado or Todos"),
    limit: int = Query(default=100, ge=1, le=500, description="Maximum number of results"),
    offset: int = Query(default=0, ge=0, description="Number of results to skip"),
    include_pagination: bool = Query(default=False, description="Include pagination metadata"),
    ctx: AppContext = Depends(get_context),
    _: dict = Depends(get_current_user),
):
    """
    List the roster loaded at startup, filtered in memory.

    Use ?include_pagination=true to get pagination metadata.
    """
    matches = ctx.filter_employees(search=search, status=status_filter)
    total = len(matches)
    items = [employee_to_list_item(e) for e in matches[offset:offset + limit]]

    if include_pagination:
        return EmployeePage(
            items=items,
            pagination=PaginationMeta.for_page(total, limit, offset, len(items)),
        )
    return items


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(
    employee_id: str,
    ctx: AppContext = Depends(get_context),
    _: dict = Depends(get_current_user),
):
    return employee_to_out(_get_or_404(ctx, employee_id))


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
async def create_employee(
    body: EmployeeCreate,
    ctx: AppContext = Depends(require_online),
    _: dict = Depends(get_current_user),
):
    saved = await ctx.create_employee(body.model_dump(mode="json"))
    if saved is None:
        raise action_failed(ctx)
    return employee_to_out(saved)


@router.put("/{employee_id}", response_model=EmployeeOut)
async def update_employee(
    employee_id: str,
    body: EmployeeUpdate,
    ctx: AppContext = Depends(require_online),
    _: dict = Depends(get_current_user),
):
    _get_or_404(ctx, employee_id)
    saved = await ctx.update_employee(employee_id, body.model_dump(mode="json", exclude_unset=True))
    if saved is None:
        raise action_failed(ctx)
    return employee_to_out(saved)


@router.patch("/{employee_id}/status", response_model=EmployeeOut)
async def update_employee_status(
    employee_id: str,
    body: EmployeeStatusUpdate,
    ctx: AppContext = Depends(require_online),
    _: dict = Depends(get_current_user),
):
    _get_or_404(ctx, employee_id)
    saved = await ctx.update_employee_status(employee_id, body.status)
    if saved is None:
        raise action_failed(ctx)
    return employee_to_out(saved)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str,
    confirm: bool = Query(default=False, description="Must be true; deletion also removes the employee's events"),
    ctx: AppContext = Depends(require_online),
    _: dict = Depends(get_current_user),
):
    _get_or_404(ctx, employee_id)
    if not confirm:
        await ctx.delete_employee(employee_id, confirmed=False)
        raise HTTPException(status_code=400, detail="Deletion must be confirmed with ?confirm=true")
    if not await ctx.delete_employee(employee_id, confirmed=True):
        raise action_failed(ctx)


@router.get("/{employee_id}/events", response_model=list[EventOut])
def list_employee_events(
    employee_id: str,
    ctx: AppContext = Depends(get_context),
    _: dict = Depends(get_current_user),
):
    """Events of one employee, newest first."""
    _get_or_404(ctx, employee_id)
    return [event_to_out(ev) for ev in ctx.events_for(employee_id)]


@router.get("/{employee_id}/documents", response_model=list[DocumentOut])
async def list_employee_documents(
    employee_id: str,
    ctx: AppContext = Depends(get_context),
    _: dict = Depends(get_current_user),
):
    _get_or_404(ctx, employee_id)
    documents = await ctx.list_documents(employee_id)
    if documents is None:
        raise action_failed(ctx)
    return [document_to_out(d) for d in documents]

