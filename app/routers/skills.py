"""Skill endpoints.

Skill responses embed the referenced category under ``categoryInfo``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from app.models.common import Envelope
from app.models.skill import Skill, SkillCreate, SkillUpdate
from app.routers.deps import require_admin
from app.services import skills as service

router = APIRouter()


@router.get("", response_model=Envelope[list[Skill]])
def list_skills() -> Envelope[list[Skill]]:
    return Envelope(data=service.list_skills())


@router.get("/{skill_id}", response_model=Envelope[Skill])
def get_skill(skill_id: str) -> Envelope[Skill]:
    return Envelope(data=service.get_skill(skill_id))


@router.post(
    "",
    status_code=201,
    response_model=Envelope[Skill],
    dependencies=[Depends(require_admin)],
)
def create_skill(payload: SkillCreate) -> Envelope[Skill]:
    return Envelope(data=service.create_skill(payload))


@router.patch(
    "/{skill_id}",
    response_model=Envelope[Skill],
    dependencies=[Depends(require_admin)],
)
def update_skill(skill_id: str, payload: SkillUpdate) -> Envelope[Skill]:
    return Envelope(data=service.update_skill(skill_id, payload))


@router.delete(
    "/{skill_id}",
    status_code=204,
    response_class=Response,
    dependencies=[Depends(require_admin)],
)
def delete_skill(skill_id: str) -> Response:
    service.delete_skill(skill_id)
    return Response(status_code=204)
