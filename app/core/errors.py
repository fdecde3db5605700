# app/core/errors.py
"""
Errores de dominio.

Los servicios los lanzan donde se detectan; `register_error_handlers`
los traduce a respuestas HTTP en el borde de la app.
"""
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse


class ServiceError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def detail(self):
        return self.message


# -------- 400 --------
class InvalidDateFormat(ServiceError):
    def __init__(self, text: str, field: str | None = None):
        self.text = text
        self.field = field
        message = f"Invalid date format: '{text}' (expected yyyy-MM-dd or dd-MM-yyyy)"
        super().__init__(f"{field}: {message}" if field else message)

    def for_field(self, field: str) -> "InvalidDateFormat":
        return InvalidDateFormat(self.text, field=field)


class InvalidDateRange(ServiceError):
    pass


class SalaryBelowRoleMinimum(ServiceError):
    def __init__(self, salary: float, min_salary: float):
        self.salary = salary
        self.min_salary = min_salary
        super().__init__(
            f"salary: {salary} cannot be lower than the role's minimum salary ({min_salary})"
        )


class ValidationFailed(ServiceError):
    def __init__(self, errors: list):
        self.errors = errors
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))

    def detail(self):
        return [{"field": e.field, "message": e.message} for e in self.errors]


class InvalidAssociation(ServiceError):
    pass


class EntityInUse(ServiceError):
    pass


# -------- 404 --------
class EntityNotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class RoleNotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"role '{name}' not found")


# -------- 409 --------
class UniquenessConflict(ServiceError):
    status_code = status.HTTP_409_CONFLICT


# -------- señales (no son errores reales) --------
class NoContent(ServiceError):
    status_code = status.HTTP_204_NO_CONTENT


class NotModified(ServiceError):
    status_code = status.HTTP_304_NOT_MODIFIED


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def _service_error(_: Request, exc: ServiceError):
        # 204/304 no llevan cuerpo
        if exc.status_code in (status.HTTP_204_NO_CONTENT, status.HTTP_304_NOT_MODIFIED):
            return Response(status_code=exc.status_code)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail()})
