# app/routers/technologies.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app import schemas
from app.db import get_db
from app.services.technologies import TechnologyService

router = APIRouter(prefix="/technologies", tags=["Technologies"])

def get_technology_service(db: Session = Depends(get_db)) -> TechnologyService:
    return TechnologyService(db)

@router.get("", response_model=list[schemas.TechnologyOut],
            responses={204: {"description": "Sin resultados"}})
def list_technologies(name: str | None = None,
                      service: TechnologyService = Depends(get_technology_service)):
    return [schemas.TechnologyOut.model_validate(t) for t in service.list(name=name)]

@router.get("/{technology_id}", response_model=schemas.TechnologyOut)
def get_technology(technology_id: int, service: TechnologyService = Depends(get_technology_service)):
    return schemas.TechnologyOut.model_validate(service.get(technology_id))

@router.get("/{technology_id}/employees", response_model=list[schemas.EmployeeOut])
def technology_employees(technology_id: int,
                         service: TechnologyService = Depends(get_technology_service)):
    return [schemas.EmployeeOut.model_validate(e) for e in service.employees(technology_id)]

@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.TechnologyOut)
def create_technology(payload: schemas.TechnologyIn,
                      service: TechnologyService = Depends(get_technology_service)):
    return schemas.TechnologyOut.model_validate(service.create(payload))

@router.put("/{technology_id}", response_model=schemas.TechnologyOut,
            responses={304: {"description": "Payload sin cambios"}})
def update_technology(technology_id: int, payload: schemas.TechnologyUpdate,
                      service: TechnologyService = Depends(get_technology_service)):
    return schemas.TechnologyOut.model_validate(service.update(technology_id, payload))

@router.delete("/{technology_id}")
def delete_technology(technology_id: int,
                      service: TechnologyService = Depends(get_technology_service)):
    service.delete(technology_id)
    return Response(status_code=status.HTTP_200_OK)
