from datetime import date
from pydantic import BaseModel, ConfigDict

# -------- payloads de entrada --------
class PartialUpdate(BaseModel):
    """DTO de modificación: None o texto en blanco significan "sin cambios"."""

    def changes(self) -> dict:
        out = {}
        for name, value in self.model_dump().items():
            if value is None:
                continue
            if isinstance(value, str) and not value.strip():
                continue
            out[name] = value
        return out

    def all_empty(self) -> bool:
        return not self.changes()


class RoleIn(BaseModel):
    name: str
    min_salary: float | None = None

class RoleUpdate(PartialUpdate):
    name: str | None = None
    min_salary: float | None = None


class EmployeeIn(BaseModel):
    name: str
    surname: str
    hiring_date: str
    role_name: str
    salary: float | None = None
    experience_level: int | None = None

class EmployeeUpdate(PartialUpdate):
    name: str | None = None
    surname: str | None = None
    hiring_date: str | None = None
    role_name: str | None = None
    salary: float | None = None
    experience_level: int | None = None


class ProjectIn(BaseModel):
    name: str
    description: str
    start_date: str | None = None
    end_date: str | None = None

class ProjectUpdate(PartialUpdate):
    name: str | None = None
    description: str | None = None
    start_date: str | None = None
    end_date: str | None = None


class TechnologyIn(BaseModel):
    name: str
    description: str | None = None

class TechnologyUpdate(PartialUpdate):
    name: str | None = None
    description: str | None = None


class CustomerIn(BaseModel):
    name: str
    surname: str
    email: str
    phone: str | None = None
    employee_id: int | None = None

class CustomerUpdate(PartialUpdate):
    name: str | None = None
    surname: str | None = None
    email: str | None = None
    phone: str | None = None
    employee_id: int | None = None


# -------- respuestas --------
class RoleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    min_salary: float

class TechnologyOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    description: str | None = None

class EmployeeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    surname: str
    hiring_date: date
    experience_level: int
    salary: float
    role: RoleOut
    technologies: list[TechnologyOut] = []

class ProjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    description: str
    start_date: date | None = None
    end_date: date | None = None

class CustomerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    surname: str
    email: str
    phone: str | None = None
    employee_id: int | None = None
