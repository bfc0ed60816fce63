# src/services/resource_service.py
from typing import Any, Dict, Optional

from src.services.results import Result
from src.services.table_gateway import TableGateway


class ResourceService:
    """
    Las seis operaciones CRUD de un recurso, todas con una sola llamada al gateway.

    `label` es el nombre que aparece en los mensajes ("Team not found",
    "Team deleted successfully").
    """

    def __init__(self, table: str, label: str, order_by: str = "created_at", ascending: bool = False):
        self.table = table
        self.label = label
        self.order_by = order_by
        self.ascending = ascending

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"

    @property
    def deleted_message(self) -> str:
        return f"{self.label} deleted successfully"

    def list_all(self, gateway: TableGateway) -> Result:
        return gateway.select(self.table, order_by=self.order_by, ascending=self.ascending)

    def list_where(
        self,
        gateway: TableGateway,
        filters: Dict[str, Any],
        order_by: Optional[str] = None,
        ascending: Optional[bool] = None,
    ) -> Result:
        return gateway.select(
            self.table,
            filters=filters,
            order_by=order_by or self.order_by,
            ascending=self.ascending if ascending is None else ascending,
        )

    def get_by_id(self, gateway: TableGateway, record_id: Any) -> Result:
        return gateway.select_one(self.table, {"id": record_id})

    def get_by_foreign_key(
        self,
        gateway: TableGateway,
        column: str,
        parent_id: Any,
        order_by: Optional[str] = None,
        ascending: Optional[bool] = None,
    ) -> Result:
        return self.list_where(gateway, {column: parent_id}, order_by=order_by, ascending=ascending)

    def create(self, gateway: TableGateway, values: Dict[str, Any]) -> Result:
        return gateway.insert(self.table, values)

    def update(self, gateway: TableGateway, record_id: Any, values: Dict[str, Any]) -> Result:
        return gateway.update(self.table, {"id": record_id}, values)

    def delete(self, gateway: TableGateway, record_id: Any) -> Result:
        return gateway.delete(self.table, {"id": record_id})
