"""Skill category endpoints.

There is no PUT: categories are changed with PATCH, which never touches the
``key``.  DELETE refuses while skills still use the category.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from app.models.category import Category, CategoryCreate, CategoryUpdate
from app.models.common import Envelope
from app.routers.deps import require_admin
from app.services import categories as service

router = APIRouter()


@router.get("", response_model=Envelope[list[Category]])
def list_categories() -> Envelope[list[Category]]:
    return Envelope(data=service.list_categories())


@router.get("/{category_id}", response_model=Envelope[Category])
def get_category(category_id: str) -> Envelope[Category]:
    return Envelope(data=service.get_category(category_id))


@router.post(
    "",
    status_code=201,
    response_model=Envelope[Category],
    dependencies=[Depends(require_admin)],
)
def create_category(payload: CategoryCreate) -> Envelope[Category]:
    return Envelope(data=service.create_category(payload))


@router.patch(
    "/{category_id}",
    response_model=Envelope[Category],
    dependencies=[Depends(require_admin)],
)
def update_category(category_id: str, payload: CategoryUpdate) -> Envelope[Category]:
    return Envelope(data=service.update_category(category_id, payload))


@router.delete(
    "/{category_id}",
    status_code=204,
    response_class=Response,
    dependencies=[Depends(require_admin)],
)
def delete_category(category_id: str) -> Response:
    service.delete_category(category_id)
    return Response(status_code=204)
