from contextlib import contextmanager
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Any, Dict, Iterator, Type, TypeVar
import logging
from shop_api.database import Base
from shop_api.errors import ConstraintViolationError, PersistenceError, RecordNotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


@contextmanager
def persistence_errors(db: Session) -> Iterator[None]:
    """Roll back and re-raise persistence failures as typed API errors."""
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        raise ConstraintViolationError(str(e.orig)) from e
    except SQLAlchemyError as e:
        db.rollback()
        raise PersistenceError(str(e)) from e
    except OverflowError as e:
        # driver refused an integer that does not fit the column
        db.rollback()
        raise PersistenceError(str(e)) from e


def create_record(db: Session, model: Type[ModelT], data: Dict[str, Any]) -> ModelT:
    db_obj = model(**data)
    with persistence_errors(db):
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
    logger.info("Created %r", db_obj)
    return db_obj


def _get_for_write(db: Session, model: Type[ModelT], record_id: int) -> ModelT:
    with persistence_errors(db):
        db_obj = db.query(model).filter(model.id == record_id).first()
    if db_obj is None:
        raise RecordNotFoundError(f"{model.__name__} {record_id} does not exist")
    return db_obj


def update_record(db: Session, model: Type[ModelT], record_id: int, changes: Dict[str, Any]) -> ModelT:
    db_obj = _get_for_write(db, model, record_id)
    with persistence_errors(db):
        for field, value in changes.items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
    logger.info("Updated %r (%s)", db_obj, ", ".join(changes) or "no changes")
    return db_obj


def delete_record(db: Session, model: Type[ModelT], record_id: int) -> None:
    db_obj = _get_for_write(db, model, record_id)
    with persistence_errors(db):
        db.delete(db_obj)
        db.commit()
    logger.info("Deleted %s %s", model.__name__, record_id)
