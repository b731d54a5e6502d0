"""
Persistence Gateway

Thin CRUD helpers over a single Django model table: select with
filters/ordering/offset/limit, insert, update by id, delete by id and
page-numbered listing. Every call is one round trip to the database;
nothing is cached between calls.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Mapping, TypeVar

from django.db import models

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=models.Model)


@dataclass(frozen=True)
class Page(Generic[ModelT]):
    """One page of rows plus the pagination block returned by the API."""

    items: list[ModelT]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0

    def pagination(self) -> dict[str, int]:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
        }


class TableGateway(Generic[ModelT]):
    """CRUD operations for one table."""

    def __init__(self, model: type[ModelT]):
        self.model = model

    @property
    def table(self) -> str:
        return self.model._meta.db_table

    def queryset(self) -> models.QuerySet:
        return self.model._default_manager.all()

    def select(
        self,
        filters: Mapping[str, Any] | None = None,
        *,
        order_by: Iterable[str] = (),
        offset: int = 0,
        limit: int | None = None,
        queryset: models.QuerySet | None = None,
    ) -> list[ModelT]:
        qs = self.queryset() if queryset is None else queryset
        if filters:
            qs = qs.filter(**filters)
        order_by = tuple(order_by)
        if order_by:
            qs = qs.order_by(*order_by)
        if limit is not None:
            qs = qs[offset:offset + limit]
        elif offset:
            qs = qs[offset:]
        return list(qs)

    def first(self, **filters: Any) -> ModelT | None:
        return self.queryset().filter(**filters).first()

    def exists(self, **filters: Any) -> bool:
        return self.queryset().filter(**filters).exists()

    def count(self, **filters: Any) -> int:
        return self.queryset().filter(**filters).count()

    def insert(self, data: Mapping[str, Any]) -> ModelT:
        row = self.model._default_manager.create(**data)
        logger.debug(f"Inserted row {row.pk} into {self.table}")
        return row

    def update(self, pk: Any, data: Mapping[str, Any]) -> ModelT | None:
        """Apply ``data`` to the row with primary key ``pk``.

        Goes through ``save(update_fields=...)`` so ``auto_now`` columns
        are refreshed. Returns ``None`` when the row does not exist.
        """
        row = self.first(pk=pk)
        if row is None:
            return None
        for field_name, value in data.items():
            setattr(row, field_name, value)
        update_fields = list(data.keys())
        for field in self.model._meta.concrete_fields:
            if getattr(field, "auto_now", False) and field.name not in update_fields:
                update_fields.append(field.name)
        row.save(update_fields=update_fields)
        logger.debug(f"Updated row {pk} in {self.table}: {sorted(data)}")
        return row

    def delete(self, pk: Any) -> bool:
        deleted, _ = self.queryset().filter(pk=pk).delete()
        if deleted:
            logger.debug(f"Deleted row {pk} from {self.table}")
        return bool(deleted)

    def paginate(
        self,
        queryset: models.QuerySet,
        *,
        page: int,
        limit: int,
        order_by: Iterable[str] = ("-created_at",),
    ) -> Page[ModelT]:
        """Return ``page`` (1-based) of ``queryset`` with ``limit`` rows."""
        total = queryset.count()
        offset = (page - 1) * limit
        items = self.select(order_by=order_by, offset=offset, limit=limit, queryset=queryset)
        return Page(items=items, page=page, limit=limit, total=total)
