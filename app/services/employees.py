from __future__ import annotations

import logging
from datetime import date
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from app import schemas
from app.core.dates import parse_optional_date
from app.core.errors import EntityInUse, InvalidAssociation, NoContent, NotModified
from app.core.validation import ensure_valid, validate_employee, validate_salary
from app.models import Customer, Employee, Project, Technology
from app.services.common import (
    apply_changes, check_range, commit_or_conflict, commit_or_in_use, get_or_404,
)
from app.services.roles import RoleService

logger = logging.getLogger("employees")
logger.setLevel(logging.INFO)


class EmployeeService:
    def __init__(self, db: Session, roles: RoleService):
        self.db = db
        self.roles = roles

    def list(
        self,
        surname: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Employee]:
        check_range(start_date, end_date)
        stmt = select(Employee).order_by(Employee.id)
        if surname:
            stmt = stmt.where(func.lower(Employee.surname) == surname.lower())
        if start_date is not None:
            stmt = stmt.where(Employee.hiring_date >= start_date)
        if end_date is not None:
            stmt = stmt.where(Employee.hiring_date <= end_date)
        employees = list(self.db.scalars(stmt))
        if not employees:
            raise NoContent("no employees found")
        return employees

    def get(self, employee_id: int) -> Employee:
        return get_or_404(self.db, Employee, employee_id, "employee")

    def technologies(self, employee_id: int) -> list[Technology]:
        employee = self.get(employee_id)
        if not employee.technologies:
            raise NoContent("employee has no technologies")
        return list(employee.technologies)

    def projects(self, employee_id: int) -> list[Project]:
        employee = self.get(employee_id)
        if not employee.projects:
            raise NoContent("employee has no projects")
        return list(employee.projects)

    def customers(self, employee_id: int) -> list[Customer]:
        employee = self.get(employee_id)
        if not employee.customers:
            raise NoContent("employee has no customers")
        return list(employee.customers)

    def create(self, payload: schemas.EmployeeIn) -> Employee:
        hiring_date = parse_optional_date(payload.hiring_date, "hiring date")
        role = self.roles.get_by_name(payload.role_name)
        salary = validate_salary(payload.salary, role)

        employee = Employee(
            name=payload.name,
            surname=payload.surname,
            hiring_date=hiring_date,
            experience_level=payload.experience_level or 0,
            salary=salary,
            role=role,
        )
        ensure_valid(validate_employee(employee))
        self.db.add(employee)
        commit_or_conflict(self.db, "employee")
        self.db.refresh(employee)
        logger.info("employee_created", extra={
            "employee_id": employee.id, "role_id": role.id, "salary": employee.salary,
        })
        return employee

    def update(self, employee_id: int, payload: schemas.EmployeeUpdate) -> Employee:
        if payload.all_empty():
            raise NotModified()
        employee = self.get(employee_id)
        changes = payload.changes()

        if "hiring_date" in changes:
            changes["hiring_date"] = parse_optional_date(changes["hiring_date"], "hiring date")

        role = employee.role
        role_name = changes.pop("role_name", None)
        if role_name is not None:
            role = self.roles.get_by_name(role_name)

        # salario nuevo, o el actual si solo cambia el rol
        if "salary" in changes:
            changes["salary"] = validate_salary(changes["salary"], role)
        elif role_name is not None:
            validate_salary(employee.salary, role)

        apply_changes(employee, changes)
        employee.role = role
        ensure_valid(validate_employee(employee))
        commit_or_conflict(self.db, "employee")
        self.db.refresh(employee)
        fields = sorted(changes) + (["role"] if role_name is not None else [])
        logger.info("employee_updated", extra={"employee_id": employee.id, "fields": fields})
        return employee

    def delete(self, employee_id: int) -> None:
        employee = self.get(employee_id)
        if employee.customers:
            raise EntityInUse(
                f"employee {employee_id} is the referent of {len(employee.customers)} customer(s)"
            )
        # los vínculos con proyectos/tecnologías se borran con la entidad
        self.db.delete(employee)
        commit_or_in_use(self.db, f"employee {employee_id}")
        logger.info("employee_deleted", extra={"employee_id": employee_id})

    # -------- asociaciones --------
    def add_technology(self, employee_id: int, technology_id: int) -> Employee:
        employee = self.get(employee_id)
        technology = get_or_404(self.db, Technology, technology_id, "technology")
        if technology in employee.technologies:
            raise InvalidAssociation(
                f"technology {technology_id} is already assigned to employee {employee_id}"
            )
        employee.technologies.append(technology)
        self.db.commit()
        logger.info("association_added", extra={
            "employee_id": employee_id, "technology_id": technology_id,
        })
        return employee

    def remove_technology(self, employee_id: int, technology_id: int) -> Employee:
        employee = self.get(employee_id)
        technology = get_or_404(self.db, Technology, technology_id, "technology")
        if technology not in employee.technologies:
            raise InvalidAssociation(
                f"technology {technology_id} is not assigned to employee {employee_id}"
            )
        employee.technologies.remove(technology)
        self.db.commit()
        logger.info("association_removed", extra={
            "employee_id": employee_id, "technology_id": technology_id,
        })
        return employee
