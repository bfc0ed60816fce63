# src/services/table_gateway.py
from typing import Any, Dict, List, Optional

from fastapi import Depends
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.database import get_db
from src.models import TABLES
from src.services.results import Ok, NotFound, Conflict, BackendError, Result
from src.utils.logger_config import app_logger as logger


def _columns(model) -> Dict[str, str]:
    """Nombre de columna -> atributo mapeado (p. ej. "try" -> "try_")."""
    return {attr.columns[0].name: attr.key for attr in inspect(model).column_attrs}


def _as_record(obj) -> Dict[str, Any]:
    return {
        attr.columns[0].name: getattr(obj, attr.key)
        for attr in inspect(obj).mapper.column_attrs
    }


class TableGateway:
    """
    Acceso a la base por nombre de tabla, filtros de igualdad y orden.

    Cada operación es una sola sentencia; los errores del driver se
    convierten en Conflict o BackendError y la sesión se hace rollback.
    """

    def __init__(self, db: Session):
        self.db = db

    def _model(self, table: str):
        model = TABLES.get(table)
        if model is None:
            raise ValueError(f"Tabla desconocida: {table}")
        return model

    def _query(self, model, filters: Optional[Dict[str, Any]]):
        columns = _columns(model)
        query = self.db.query(model)
        for name, value in (filters or {}).items():
            query = query.filter(getattr(model, columns[name]) == value)
        return query

    def _failure(self, table: str, action: str, exc: SQLAlchemyError) -> Result:
        self.db.rollback()
        message = str(getattr(exc, "orig", None) or exc)
        logger.warning(f"{action} en '{table}' falló: {message}")
        if isinstance(exc, IntegrityError):
            return Conflict(message)
        return BackendError(message)

    def _unknown_columns(self, model, values: Dict[str, Any]) -> Optional[Result]:
        columns = _columns(model)
        unknown = [name for name in values if name not in columns]
        if unknown:
            return BackendError(
                f"Column '{unknown[0]}' does not exist on '{model.__tablename__}'"
            )
        return None

    def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        ascending: bool = True,
    ) -> Result:
        model = self._model(table)
        try:
            query = self._query(model, filters)
            if order_by:
                column = getattr(model, _columns(model)[order_by])
                query = query.order_by(column.asc() if ascending else column.desc())
            rows: List[Dict[str, Any]] = [_as_record(row) for row in query.all()]
        except SQLAlchemyError as exc:
            return self._failure(table, "select", exc)
        return Ok(rows)

    def select_one(self, table: str, filters: Dict[str, Any]) -> Result:
        model = self._model(table)
        try:
            row = self._query(model, filters).first()
        except SQLAlchemyError as exc:
            return self._failure(table, "select", exc)
        if row is None:
            return NotFound()
        return Ok(_as_record(row))

    def insert(self, table: str, values: Dict[str, Any]) -> Result:
        model = self._model(table)
        invalid = self._unknown_columns(model, values)
        if invalid:
            return invalid

        columns = _columns(model)
        row = model(**{columns[name]: value for name, value in values.items()})
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as exc:
            return self._failure(table, "insert", exc)

        logger.info(f"Registro creado en '{table}' (id={row.id})")
        return Ok(_as_record(row))

    def update(self, table: str, filters: Dict[str, Any], values: Dict[str, Any]) -> Result:
        model = self._model(table)
        invalid = self._unknown_columns(model, values)
        if invalid:
            return invalid

        columns = _columns(model)
        try:
            row = self._query(model, filters).first()
            if row is None:
                return NotFound()
            for name, value in values.items():
                setattr(row, columns[name], value)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as exc:
            return self._failure(table, "update", exc)
        return Ok(_as_record(row))

    def delete(self, table: str, filters: Dict[str, Any]) -> Result:
        model = self._model(table)
        try:
            deleted = self._query(model, filters).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as exc:
            return self._failure(table, "delete", exc)
        return Ok(deleted)


def get_gateway(db: Session = Depends(get_db)) -> TableGateway:
    return TableGateway(db)
