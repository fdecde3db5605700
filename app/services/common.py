"""
Piezas compartidas por los servicios: carga por id, fusión parcial y commit.
"""
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.errors import EntityInUse, EntityNotFound, InvalidDateRange, UniquenessConflict

logger = logging.getLogger("services")


def get_or_404(db: Session, model, entity_id: int, label: str):
    obj = db.get(model, entity_id)
    if obj is None:
        raise EntityNotFound(label, entity_id)
    return obj


def apply_changes(entity, changes: dict) -> None:
    """Sobrescribe en la entidad cada campo presente en `changes`."""
    for name, value in changes.items():
        setattr(entity, name, value)


def check_range(start, end) -> None:
    if start is not None and end is not None and start > end:
        raise InvalidDateRange("start date: must not be after end date")


def commit_or_conflict(db: Session, what: str) -> None:
    """Commit; una violación de restricción única se informa como conflicto."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("commit_conflict", extra={"entity": what, "error": str(exc.orig)})
        raise UniquenessConflict(f"{what}: conflicts with an existing record") from exc


def commit_or_in_use(db: Session, what: str) -> None:
    """Commit de un borrado; si otra fila aún la referencia, error de petición."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("delete_rejected", extra={"entity": what, "error": str(exc.orig)})
        raise EntityInUse(f"{what}: still referenced by other records") from exc
