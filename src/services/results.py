# src/services/results.py
"""
Resultados etiquetados que devuelve el gateway.

Los handlers nunca ven excepciones del driver: reciben uno de estos
valores y deciden el status HTTP.
"""
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Ok:
    value: Any = None


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Conflict:
    """Violación de constraint (unique, foreign key, not null)."""
    message: str


@dataclass(frozen=True)
class BackendError:
    message: str


Result = Union[Ok, NotFound, Conflict, BackendError]
