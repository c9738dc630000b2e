"""Project endpoints.

Reads are public; create / update / delete require an admin token.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response

from app.models.common import Envelope
from app.models.project import Project, ProjectCreate, ProjectUpdate
from app.routers.deps import require_admin
from app.services import projects as service

router = APIRouter()


@router.get("", response_model=Envelope[list[Project]])
def list_projects(
    featured: bool | None = Query(
        default=None,
        description="Only featured (true) or non-featured (false) projects",
    ),
) -> Envelope[list[Project]]:
    return Envelope(data=service.list_projects(featured=featured))


@router.get("/{project_id}", response_model=Envelope[Project])
def get_project(project_id: str) -> Envelope[Project]:
    return Envelope(data=service.get_project(project_id))


@router.post(
    "",
    status_code=201,
    response_model=Envelope[Project],
    dependencies=[Depends(require_admin)],
)
def create_project(payload: ProjectCreate) -> Envelope[Project]:
    return Envelope(data=service.create_project(payload))


@router.patch(
    "/{project_id}",
    response_model=Envelope[Project],
    dependencies=[Depends(require_admin)],
)
def update_project(project_id: str, payload: ProjectUpdate) -> Envelope[Project]:
    return Envelope(data=service.update_project(project_id, payload))


@router.delete(
    "/{project_id}",
    status_code=204,
    response_class=Response,
    dependencies=[Depends(require_admin)],
)
def delete_project(project_id: str) -> Response:
    service.delete_project(project_id)
    return Response(status_code=204)
