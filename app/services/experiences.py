"""Experience service."""

from app.models.experience import Experience, ExperienceCreate, ExperienceUpdate
from app.services.store import experiences as store


def list_experiences() -> list[Experience]:
    """Return experiences by ``order``, newest first within the same order."""
    return [Experience.from_document(doc) for doc in store.list()]


def get_experience(experience_id: str) -> Experience:
    return Experience.from_document(store.get(experience_id))


def create_experience(payload: ExperienceCreate) -> Experience:
    return Experience.from_document(store.create(payload.to_document()))


def update_experience(experience_id: str, payload: ExperienceUpdate) -> Experience:
    return Experience.from_document(store.update(experience_id, payload.to_document()))


def delete_experience(experience_id: str) -> None:
    store.delete(experience_id)
