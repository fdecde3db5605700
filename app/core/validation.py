# app/core/validation.py
"""
Reglas de validación explícitas, invocadas por los servicios antes de persistir.

- `validate_salary`: política salario vs. salario mínimo del rol (alta y modificación).
- `validate_<entidad>`: valida la entidad a guardar contra un modelo pydantic con
  las restricciones de sus campos; devuelve un `ValidationResult` y `ensure_valid`
  lo convierte en error.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationError, field_validator
from app.core.errors import SalaryBelowRoleMinimum, ValidationFailed


def validate_salary(candidate: float | None, role) -> float:
    min_salary = role.min_salary
    if not min_salary:
        # sin suelo: None/0 -> 0, el resto pasa tal cual
        return candidate if candidate else 0
    if candidate is None:
        return min_salary
    if candidate < min_salary:
        raise SalaryBelowRoleMinimum(candidate, min_salary)
    return candidate


@dataclass
class FieldError:
    field: str
    message: str


@dataclass
class ValidationResult:
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def ensure_valid(result: ValidationResult) -> None:
    if not result.ok:
        raise ValidationFailed(result.errors)


# -------- restricciones por entidad --------
# texto obligatorio: no vacío tras quitar espacios
Text80 = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=80)]
Text120 = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]
Text320 = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=320)]
Text500 = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]


class _Rules(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class RoleRules(_Rules):
    name: Text120
    min_salary: float = Field(ge=0)


class EmployeeRules(_Rules):
    name: Text80
    surname: Text80
    hiring_date: date
    salary: float = Field(ge=0)
    experience_level: int = Field(ge=0)


class ProjectRules(_Rules):
    name: Text120
    description: Text500


class TechnologyRules(_Rules):
    name: Text120
    description: str | None = Field(default=None, max_length=500)


class CustomerRules(_Rules):
    name: Text80
    surname: Text80
    email: Text320
    phone: str | None = Field(default=None, max_length=40)

    @field_validator("email")
    @classmethod
    def has_at_sign(cls, v):
        if "@" not in v:
            raise ValueError("must be a valid email address")
        return v


def _message(err: dict) -> str:
    kind, ctx = err["type"], err.get("ctx", {})
    if err.get("input") is None:
        return "is required"
    if kind == "string_too_short":
        return "must not be blank"
    if kind == "string_too_long":
        return f"must be at most {ctx['max_length']} characters"
    if kind == "greater_than_equal":
        return f"must be >= {ctx['ge']}"
    if kind == "value_error":
        return str(ctx["error"])
    return err["msg"]


def _check(rules: type[BaseModel], entity) -> ValidationResult:
    result = ValidationResult()
    try:
        rules.model_validate(entity, from_attributes=True)
    except ValidationError as exc:
        for err in exc.errors():
            name = ".".join(str(part) for part in err["loc"])
            result.errors.append(FieldError(name, _message(err)))
    return result


def validate_role(role) -> ValidationResult:
    return _check(RoleRules, role)


def validate_employee(employee) -> ValidationResult:
    return _check(EmployeeRules, employee)


def validate_project(project) -> ValidationResult:
    return _check(ProjectRules, project)


def validate_technology(technology) -> ValidationResult:
    return _check(TechnologyRules, technology)


def validate_customer(customer) -> ValidationResult:
    return _check(CustomerRules, customer)
