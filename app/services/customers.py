from __future__ import annotations

import logging
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from app import schemas
from app.core.errors import NoContent, NotModified
from app.core.validation import ensure_valid, validate_customer
from app.models import Customer, Employee
from app.services.common import apply_changes, commit_or_conflict, get_or_404

logger = logging.getLogger("customers")
logger.setLevel(logging.INFO)


class CustomerService:
    def __init__(self, db: Session):
        self.db = db

    def list(self, name: str | None = None, surname: str | None = None) -> list[Customer]:
        stmt = select(Customer).order_by(Customer.id)
        if name:
            stmt = stmt.where(func.lower(Customer.name) == name.lower())
        if surname:
            stmt = stmt.where(func.lower(Customer.surname) == surname.lower())
        customers = list(self.db.scalars(stmt))
        if not customers:
            raise NoContent("no customers found")
        return customers

    def get(self, customer_id: int) -> Customer:
        return get_or_404(self.db, Customer, customer_id, "customer")

    def create(self, payload: schemas.CustomerIn) -> Customer:
        customer = Customer(
            name=payload.name,
            surname=payload.surname,
            email=payload.email,
            phone=payload.phone,
        )
        if payload.employee_id is not None:
            customer.employee = get_or_404(self.db, Employee, payload.employee_id, "employee")
        ensure_valid(validate_customer(customer))
        self.db.add(customer)
        commit_or_conflict(self.db, "customer")
        self.db.refresh(customer)
        logger.info("customer_created", extra={
            "customer_id": customer.id, "employee_id": customer.employee_id,
        })
        return customer

    def update(self, customer_id: int, payload: schemas.CustomerUpdate) -> Customer:
        if payload.all_empty():
            raise NotModified()
        customer = self.get(customer_id)
        changes = payload.changes()
        employee_id = changes.pop("employee_id", None)
        if employee_id is not None:
            customer.employee = get_or_404(self.db, Employee, employee_id, "employee")
        apply_changes(customer, changes)
        ensure_valid(validate_customer(customer))
        commit_or_conflict(self.db, "customer")
        self.db.refresh(customer)
        logger.info("customer_updated", extra={"customer_id": customer.id})
        return customer

    def delete(self, customer_id: int) -> None:
        customer = self.get(customer_id)
        self.db.delete(customer)
        self.db.commit()
        logger.info("customer_deleted", extra={"customer_id": customer_id})
