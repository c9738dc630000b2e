"""AboutMe endpoints: public read, admin upsert."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.models.about import AboutMe, AboutMeUpdate
from app.models.common import Envelope
from app.routers.deps import require_admin
from app.services import about as service

router = APIRouter()


@router.get("", response_model=Envelope[AboutMe])
def get_about() -> Envelope[AboutMe]:
    return Envelope(data=service.get_about())


@router.put(
    "",
    response_model=Envelope[AboutMe],
    dependencies=[Depends(require_admin)],
)
def put_about(payload: AboutMeUpdate) -> Envelope[AboutMe]:
    """Create the profile on first call, update it afterwards."""
    return Envelope(data=service.upsert_about(payload))
