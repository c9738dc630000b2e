"""Work experience endpoints.

``PUT /{id}`` is kept as an alias of ``PATCH /{id}`` for older admin
clients that still send PUT.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from app.models.common import Envelope
from app.models.experience import Experience, ExperienceCreate, ExperienceUpdate
from app.routers.deps import require_admin
from app.services import experiences as service

router = APIRouter()


@router.get("", response_model=Envelope[list[Experience]])
def list_experiences() -> Envelope[list[Experience]]:
    return Envelope(data=service.list_experiences())


@router.get("/{experience_id}", response_model=Envelope[Experience])
def get_experience(experience_id: str) -> Envelope[Experience]:
    return Envelope(data=service.get_experience(experience_id))


@router.post(
    "",
    status_code=201,
    response_model=Envelope[Experience],
    dependencies=[Depends(require_admin)],
)
def create_experience(payload: ExperienceCreate) -> Envelope[Experience]:
    return Envelope(data=service.create_experience(payload))


@router.api_route(
    "/{experience_id}",
    methods=["PATCH", "PUT"],
    response_model=Envelope[Experience],
    dependencies=[Depends(require_admin)],
)
def update_experience(
    experience_id: str, payload: ExperienceUpdate
) -> Envelope[Experience]:
    return Envelope(data=service.update_experience(experience_id, payload))


@router.delete(
    "/{experience_id}",
    status_code=204,
    response_class=Response,
    dependencies=[Depends(require_admin)],
)
def delete_experience(experience_id: str) -> Response:
    service.delete_experience(experience_id)
    return Response(status_code=204)
