from __future__ import annotations

import logging
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from app import schemas
from app.core.errors import EntityInUse, NoContent, NotModified, UniquenessConflict
from app.core.validation import ensure_valid, validate_technology
from app.models import Employee, Technology
from app.services.common import apply_changes, commit_or_conflict, commit_or_in_use, get_or_404

logger = logging.getLogger("technologies")
logger.setLevel(logging.INFO)


class TechnologyService:
    def __init__(self, db: Session):
        self.db = db

    def list(self, name: str | None = None) -> list[Technology]:
        stmt = select(Technology).order_by(Technology.id)
        if name:
            stmt = stmt.where(func.lower(Technology.name) == name.lower())
        technologies = list(self.db.scalars(stmt))
        if not technologies:
            raise NoContent("no technologies found")
        return technologies

    def get(self, technology_id: int) -> Technology:
        return get_or_404(self.db, Technology, technology_id, "technology")

    def employees(self, technology_id: int) -> list[Employee]:
        technology = self.get(technology_id)
        if not technology.employees:
            raise NoContent("technology has no employees")
        return list(technology.employees)

    def _ensure_unique_name(self, name: str, exclude_id: int | None = None) -> None:
        stmt = select(Technology.id).where(func.lower(Technology.name) == name.strip().lower())
        if exclude_id is not None:
            stmt = stmt.where(Technology.id != exclude_id)
        if self.db.scalar(stmt) is not None:
            raise UniquenessConflict(f"name: technology '{name}' already exists")

    def create(self, payload: schemas.TechnologyIn) -> Technology:
        technology = Technology(name=payload.name.strip(), description=payload.description)
        ensure_valid(validate_technology(technology))
        self._ensure_unique_name(technology.name)
        self.db.add(technology)
        commit_or_conflict(self.db, "technology")
        self.db.refresh(technology)
        logger.info("technology_created", extra={"technology_id": technology.id})
        return technology

    def update(self, technology_id: int, payload: schemas.TechnologyUpdate) -> Technology:
        if payload.all_empty():
            raise NotModified()
        technology = self.get(technology_id)
        changes = payload.changes()
        if "name" in changes:
            changes["name"] = changes["name"].strip()
            self._ensure_unique_name(changes["name"], exclude_id=technology.id)
        apply_changes(technology, changes)
        ensure_valid(validate_technology(technology))
        commit_or_conflict(self.db, "technology")
        self.db.refresh(technology)
        logger.info("technology_updated", extra={"technology_id": technology.id, "fields": sorted(changes)})
        return technology

    def delete(self, technology_id: int) -> None:
        technology = self.get(technology_id)
        if technology.employees:
            raise EntityInUse(
                f"technology {technology_id} is still assigned to {len(technology.employees)} employee(s)"
            )
        self.db.delete(technology)
        commit_or_in_use(self.db, f"technology {technology_id}")
        logger.info("technology_deleted", extra={"technology_id": technology_id})
