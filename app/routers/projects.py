# app/routers/projects.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app import schemas
from app.core.dates import parse_optional_date
from app.db import get_db
from app.services.projects import ProjectService

router = APIRouter(prefix="/projects", tags=["Projects"])

def get_project_service(db: Session = Depends(get_db)) -> ProjectService:
    return ProjectService(db)

@router.get("", summary="Lista de proyectos (nombre y rango de fechas)",
            response_model=list[schemas.ProjectOut],
            responses={204: {"description": "Sin resultados"}})
def list_projects(
    name: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
    service: ProjectService = Depends(get_project_service),
):
    start = parse_optional_date(start_date, "start date")
    end = parse_optional_date(end_date, "end date")
    projects = service.list(name=name, start_date=start, end_date=end)
    return [schemas.ProjectOut.model_validate(p) for p in projects]

@router.get("/{project_id}", response_model=schemas.ProjectOut)
def get_project(project_id: int, service: ProjectService = Depends(get_project_service)):
    return schemas.ProjectOut.model_validate(service.get(project_id))

@router.get("/{project_id}/employees", summary="Empleados asignados al proyecto",
            response_model=list[schemas.EmployeeOut])
def project_employees(project_id: int, service: ProjectService = Depends(get_project_service)):
    return [schemas.EmployeeOut.model_validate(e) for e in service.employees(project_id)]

@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.ProjectOut)
def create_project(payload: schemas.ProjectIn,
                   service: ProjectService = Depends(get_project_service)):
    return schemas.ProjectOut.model_validate(service.create(payload))

@router.put("/{project_id}", response_model=schemas.ProjectOut,
            responses={304: {"description": "Payload sin cambios"}})
def update_project(project_id: int, payload: schemas.ProjectUpdate,
                   service: ProjectService = Depends(get_project_service)):
    return schemas.ProjectOut.model_validate(service.update(project_id, payload))

@router.delete("/{project_id}")
def delete_project(project_id: int, service: ProjectService = Depends(get_project_service)):
    service.delete(project_id)
    return Response(status_code=status.HTTP_200_OK)

# -------- empleados del proyecto --------
@router.put("/{project_id}/employees/{employee_id}", summary="Asignar empleado")
def add_employee(project_id: int, employee_id: int,
                 service: ProjectService = Depends(get_project_service)):
    service.add_employee(project_id, employee_id)
    return Response(status_code=status.HTTP_200_OK)

@router.delete("/{project_id}/employees/{employee_id}", summary="Quitar empleado")
def remove_employee(project_id: int, employee_id: int,
                    service: ProjectService = Depends(get_project_service)):
    service.remove_employee(project_id, employee_id)
    return Response(status_code=status.HTTP_200_OK)
