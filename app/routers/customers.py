# app/routers/customers.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app import schemas
from app.db import get_db
from app.services.customers import CustomerService

router = APIRouter(prefix="/customers", tags=["Customers"])

def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(db)

@router.get("", response_model=list[schemas.CustomerOut],
            responses={204: {"description": "Sin resultados"}})
def list_customers(name: str | None = None, surname: str | None = None,
                   service: CustomerService = Depends(get_customer_service)):
    return [schemas.CustomerOut.model_validate(c) for c in service.list(name=name, surname=surname)]

@router.get("/{customer_id}", response_model=schemas.CustomerOut)
def get_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    return schemas.CustomerOut.model_validate(service.get(customer_id))

@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.CustomerOut)
def create_customer(payload: schemas.CustomerIn,
                    service: CustomerService = Depends(get_customer_service)):
    return schemas.CustomerOut.model_validate(service.create(payload))

@router.put("/{customer_id}", response_model=schemas.CustomerOut,
            responses={304: {"description": "Payload sin cambios"}})
def update_customer(customer_id: int, payload: schemas.CustomerUpdate,
                    service: CustomerService = Depends(get_customer_service)):
    return schemas.CustomerOut.model_validate(service.update(customer_id, payload))

@router.delete("/{customer_id}")
def delete_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    service.delete(customer_id)
    return Response(status_code=status.HTTP_200_OK)
