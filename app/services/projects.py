from __future__ import annotations

import logging
from datetime import date
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from app import schemas
from app.core.dates import parse_optional_date
from app.core.errors import InvalidAssociation, NoContent, NotModified
from app.core.validation import ensure_valid, validate_project
from app.models import Employee, Project
from app.services.common import (
    apply_changes, check_range, commit_or_conflict, commit_or_in_use, get_or_404,
)

logger = logging.getLogger("projects")
logger.setLevel(logging.INFO)


class ProjectService:
    def __init__(self, db: Session):
        self.db = db

    def list(
        self,
        name: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Project]:
        """Proyectos que empiezan en/después de `start_date` y terminan en/antes de `end_date`."""
        check_range(start_date, end_date)
        stmt = select(Project).order_by(Project.id)
        if name:
            stmt = stmt.where(func.lower(Project.name) == name.lower())
        if start_date is not None:
            stmt = stmt.where(Project.start_date >= start_date)
        if end_date is not None:
            stmt = stmt.where(Project.end_date <= end_date)
        projects = list(self.db.scalars(stmt))
        if not projects:
            raise NoContent("no projects found")
        return projects

    def get(self, project_id: int) -> Project:
        return get_or_404(self.db, Project, project_id, "project")

    def employees(self, project_id: int) -> list[Employee]:
        project = self.get(project_id)
        if not project.employees:
            raise NoContent("project has no employees")
        return list(project.employees)

    def create(self, payload: schemas.ProjectIn) -> Project:
        project = Project(
            name=payload.name,
            description=payload.description,
            start_date=parse_optional_date(payload.start_date, "start date"),
            end_date=parse_optional_date(payload.end_date, "end date"),
        )
        ensure_valid(validate_project(project))
        self.db.add(project)
        commit_or_conflict(self.db, "project")
        self.db.refresh(project)
        logger.info("project_created", extra={"project_id": project.id})
        return project

    def update(self, project_id: int, payload: schemas.ProjectUpdate) -> Project:
        if payload.all_empty():
            raise NotModified()
        project = self.get(project_id)
        changes = payload.changes()
        if "start_date" in changes:
            changes["start_date"] = parse_optional_date(changes["start_date"], "start date")
        if "end_date" in changes:
            changes["end_date"] = parse_optional_date(changes["end_date"], "end date")

        apply_changes(project, changes)
        ensure_valid(validate_project(project))
        commit_or_conflict(self.db, "project")
        self.db.refresh(project)
        logger.info("project_updated", extra={"project_id": project.id, "fields": sorted(changes)})
        return project

    def delete(self, project_id: int) -> None:
        project = self.get(project_id)
        self.db.delete(project)
        commit_or_in_use(self.db, f"project {project_id}")
        logger.info("project_deleted", extra={"project_id": project_id})

    # -------- asociaciones --------
    def add_employee(self, project_id: int, employee_id: int) -> Project:
        project = self.get(project_id)
        employee = get_or_404(self.db, Employee, employee_id, "employee")
        if employee in project.employees:
            raise InvalidAssociation(
                f"employee {employee_id} is already assigned to project {project_id}"
            )
        project.employees.append(employee)
        self.db.commit()
        logger.info("association_added", extra={"project_id": project_id, "employee_id": employee_id})
        return project

    def remove_employee(self, project_id: int, employee_id: int) -> Project:
        project = self.get(project_id)
        employee = get_or_404(self.db, Employee, employee_id, "employee")
        if employee not in project.employees:
            raise InvalidAssociation(
                f"employee {employee_id} is not assigned to project {project_id}"
            )
        project.employees.remove(employee)
        self.db.commit()
        logger.info("association_removed", extra={"project_id": project_id, "employee_id": employee_id})
        return project
