"""Filtering, sorting and pagination shared by the list endpoints."""
import math
from dataclasses import dataclass

from sqlalchemy import or_
from sqlalchemy.orm import Query

from outreach.services.company_service import escape_like

ALL = "ALL"


@dataclass
class ListParams:
    page: int = 1
    limit: int = 10
    search: str = ""
    status: str = ALL
    sort_by: str = "createdAt"
    sort_order: str = "desc"


@dataclass
class PageResult:
    items: list
    total: int
    page: int
    total_pages: int


def apply_search(query: Query, columns: list, search: str) -> Query:
    """Case-insensitive substring match of ``search`` against any of ``columns``."""
    if not search:
        return query
    pattern = f"%{escape_like(search)}%"
    return query.filter(or_(*(col.ilike(pattern, escape="\\") for col in columns)))


def apply_status(query: Query, column, status: str | None) -> Query:
    if not status or status == ALL:
        return query
    return query.filter(column == status)


def apply_sort(query: Query, sortable: dict, sort_by: str, sort_order: str, default: str = "createdAt") -> Query:
    column = sortable.get(sort_by, sortable[default])
    return query.order_by(column.asc() if sort_order == "asc" else column.desc())


def paginate(query: Query, page: int, limit: int) -> PageResult:
    total = query.count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    return PageResult(
        items=items,
        total=total,
        page=page,
        total_pages=math.ceil(total / limit) if limit else 0,
    )
