from __future__ import annotations

import logging
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from app import schemas
from app.core.errors import (
    EntityInUse, NoContent, NotModified, RoleNotFound, SalaryBelowRoleMinimum, UniquenessConflict,
)
from app.core.validation import ensure_valid, validate_role
from app.models import Employee, Role
from app.services.common import apply_changes, commit_or_conflict, commit_or_in_use, get_or_404

logger = logging.getLogger("roles")
logger.setLevel(logging.INFO)


class RoleService:
    def __init__(self, db: Session):
        self.db = db

    def list(self, name: str | None = None, minimum_salary: float | None = None) -> list[Role]:
        stmt = select(Role).order_by(Role.id)
        if name:
            stmt = stmt.where(func.lower(Role.name) == name.lower())
        if minimum_salary is not None:
            stmt = stmt.where(Role.min_salary >= minimum_salary)
        roles = list(self.db.scalars(stmt))
        if not roles:
            raise NoContent("no roles found")
        return roles

    def get(self, role_id: int) -> Role:
        return get_or_404(self.db, Role, role_id, "role")

    def get_by_name(self, name: str) -> Role:
        role = self.db.scalar(select(Role).where(func.lower(Role.name) == name.strip().lower()))
        if role is None:
            raise RoleNotFound(name)
        return role

    def employees(self, role_id: int) -> list[Employee]:
        role = self.get(role_id)
        if not role.employees:
            raise NoContent("role has no employees")
        return list(role.employees)

    def _ensure_unique_name(self, name: str, exclude_id: int | None = None) -> None:
        stmt = select(Role.id).where(func.lower(Role.name) == name.strip().lower())
        if exclude_id is not None:
            stmt = stmt.where(Role.id != exclude_id)
        if self.db.scalar(stmt) is not None:
            raise UniquenessConflict(f"name: role '{name}' already exists")

    def create(self, payload: schemas.RoleIn) -> Role:
        role = Role(
            name=payload.name.strip(),
            min_salary=payload.min_salary if payload.min_salary is not None else 0,
        )
        ensure_valid(validate_role(role))
        self._ensure_unique_name(role.name)
        self.db.add(role)
        commit_or_conflict(self.db, "role")
        self.db.refresh(role)
        logger.info("role_created", extra={"role_id": role.id, "role_name": role.name})
        return role

    def update(self, role_id: int, payload: schemas.RoleUpdate) -> Role:
        if payload.all_empty():
            raise NotModified()
        role = self.get(role_id)
        changes = payload.changes()

        if "name" in changes:
            changes["name"] = changes["name"].strip()
            self._ensure_unique_name(changes["name"], exclude_id=role.id)

        new_min = changes.get("min_salary")
        if new_min:
            # nadie con este rol puede quedar por debajo del nuevo mínimo
            for emp in role.employees:
                if emp.salary < new_min:
                    logger.info("role_update_rejected", extra={
                        "role_id": role.id, "employee_id": emp.id, "reason": "salary_below_minimum",
                    })
                    raise SalaryBelowRoleMinimum(emp.salary, new_min)

        apply_changes(role, changes)
        ensure_valid(validate_role(role))
        commit_or_conflict(self.db, "role")
        self.db.refresh(role)
        logger.info("role_updated", extra={"role_id": role.id, "fields": sorted(changes)})
        return role

    def delete(self, role_id: int) -> None:
        role = self.get(role_id)
        if role.employees:
            raise EntityInUse(f"role {role_id} is still assigned to {len(role.employees)} employee(s)")
        self.db.delete(role)
        commit_or_in_use(self.db, f"role {role_id}")
        logger.info("role_deleted", extra={"role_id": role_id})
