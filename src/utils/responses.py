# src/utils/responses.py

from typing import Any, Dict

from fastapi import HTTPException, status
from pydantic import BaseModel

from src.services.results import Ok, NotFound, Result


def unwrap(result: Result, not_found_message: str = "Not found", error_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> Any:
    """Devuelve el valor de un Ok; cualquier otro resultado corta el request."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found_message)
    raise HTTPException(status_code=error_status, detail=result.message)


def to_values(payload: BaseModel) -> Dict[str, Any]:
    # Solo lo que mandó el cliente; los defaults los pone la base
    return payload.model_dump(by_alias=True, exclude_unset=True)
