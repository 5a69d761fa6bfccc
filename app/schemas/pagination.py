from pydantic import BaseModel

from app.schemas.employee import EmployeeListItem


class PaginationMeta(BaseModel):
    """Where a roster page sits within the filtered result"""
    total: int
    limit: int
    offset: int
    has_more: bool

    @classmethod
    def for_page(cls, total: int, limit: int, offset: int, returned: int) -> "PaginationMeta":
        return cls(
            total=total,
            limit=limit,
            offset=offset,
            has_more=offset + returned < total,
        )


class EmployeePage(BaseModel):
    items: list[EmployeeListItem]
    pagination: PaginationMeta
