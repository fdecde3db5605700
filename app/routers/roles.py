# app/routers/roles.py
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from app import schemas
from app.db import get_db
from app.services.roles import RoleService

router = APIRouter(prefix="/roles", tags=["Roles"])

def get_role_service(db: Session = Depends(get_db)) -> RoleService:
    return RoleService(db)

@router.get("", summary="Lista de roles (filtros opcionales)",
            response_model=list[schemas.RoleOut],
            responses={204: {"description": "Sin resultados"}})
def list_roles(
    name: str | None = None,
    minimum_salary: float | None = Query(None, ge=0),
    service: RoleService = Depends(get_role_service),
):
    roles = service.list(name=name, minimum_salary=minimum_salary)
    return [schemas.RoleOut.model_validate(r) for r in roles]

@router.get("/{role_id}", response_model=schemas.RoleOut)
def get_role(role_id: int, service: RoleService = Depends(get_role_service)):
    return schemas.RoleOut.model_validate(service.get(role_id))

@router.get("/{role_id}/employees", summary="Empleados con este rol",
            response_model=list[schemas.EmployeeOut])
def role_employees(role_id: int, service: RoleService = Depends(get_role_service)):
    return [schemas.EmployeeOut.model_validate(e) for e in service.employees(role_id)]

@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.RoleOut)
def create_role(payload: schemas.RoleIn, service: RoleService = Depends(get_role_service)):
    return schemas.RoleOut.model_validate(service.create(payload))

@router.put("/{role_id}", response_model=schemas.RoleOut,
            responses={304: {"description": "Payload sin cambios"}})
def update_role(role_id: int, payload: schemas.RoleUpdate,
                service: RoleService = Depends(get_role_service)):
    return schemas.RoleOut.model_validate(service.update(role_id, payload))

@router.delete("/{role_id}")
def delete_role(role_id: int, service: RoleService = Depends(get_role_service)):
    service.delete(role_id)
    return Response(status_code=status.HTTP_200_OK)
