# app/routers/employees.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app import schemas
from app.core.dates import parse_optional_date
from app.db import get_db
from app.services.employees import EmployeeService
from app.services.roles import RoleService

router = APIRouter(prefix="/employees", tags=["Employees"])

def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    return EmployeeService(db, roles=RoleService(db))

@router.get("", summary="Lista de empleados (apellido y rango de contratación)",
            response_model=list[schemas.EmployeeOut],
            responses={204: {"description": "Sin resultados"}})
def list_employees(
    surname: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
    service: EmployeeService = Depends(get_employee_service),
):
    # fechas en yyyy-MM-dd o dd-MM-yyyy
    start = parse_optional_date(start_date, "start date")
    end = parse_optional_date(end_date, "end date")
    employees = service.list(surname=surname, start_date=start, end_date=end)
    return [schemas.EmployeeOut.model_validate(e) for e in employees]

@router.get("/{employee_id}", response_model=schemas.EmployeeOut)
def get_employee(employee_id: int, service: EmployeeService = Depends(get_employee_service)):
    return schemas.EmployeeOut.model_validate(service.get(employee_id))

@router.get("/{employee_id}/technologies", response_model=list[schemas.TechnologyOut])
def employee_technologies(employee_id: int, service: EmployeeService = Depends(get_employee_service)):
    return [schemas.TechnologyOut.model_validate(t) for t in service.technologies(employee_id)]

@router.get("/{employee_id}/projects", response_model=list[schemas.ProjectOut])
def employee_projects(employee_id: int, service: EmployeeService = Depends(get_employee_service)):
    return [schemas.ProjectOut.model_validate(p) for p in service.projects(employee_id)]

@router.get("/{employee_id}/customers", response_model=list[schemas.CustomerOut])
def employee_customers(employee_id: int, service: EmployeeService = Depends(get_employee_service)):
    return [schemas.CustomerOut.model_validate(c) for c in service.customers(employee_id)]

@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.EmployeeOut)
def create_employee(payload: schemas.EmployeeIn,
                    service: EmployeeService = Depends(get_employee_service)):
    return schemas.EmployeeOut.model_validate(service.create(payload))

@router.put("/{employee_id}", response_model=schemas.EmployeeOut,
            responses={304: {"description": "Payload sin cambios"}})
def update_employee(employee_id: int, payload: schemas.EmployeeUpdate,
                    service: EmployeeService = Depends(get_employee_service)):
    return schemas.EmployeeOut.model_validate(service.update(employee_id, payload))

@router.delete("/{employee_id}")
def delete_employee(employee_id: int, service: EmployeeService = Depends(get_employee_service)):
    service.delete(employee_id)
    return Response(status_code=status.HTTP_200_OK)

# -------- tecnologías del empleado --------
@router.put("/{employee_id}/technologies/{technology_id}", summary="Asignar tecnología")
def add_technology(employee_id: int, technology_id: int,
                   service: EmployeeService = Depends(get_employee_service)):
    service.add_technology(employee_id, technology_id)
    return Response(status_code=status.HTTP_200_OK)

@router.delete("/{employee_id}/technologies/{technology_id}", summary="Quitar tecnología")
def remove_technology(employee_id: int, technology_id: int,
                      service: EmployeeService = Depends(get_employee_service)):
    service.remove_technology(employee_id, technology_id)
    return Response(status_code=status.HTTP_200_OK)
