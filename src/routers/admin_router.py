from typing import List

from fastapi import APIRouter, Depends, status

from src.schemas.envelope import DataEnvelope, MessageEnvelope
from src.schemas.admin_schema import AdminCreate, AdminUpdate, AdminResponse
from src.services.league_services import admin_service
from src.services.table_gateway import TableGateway, get_gateway
from src.utils.responses import unwrap, to_values

router = APIRouter(prefix="/admins", tags=["admins"])


@router.get("", response_model=DataEnvelope[List[AdminResponse]])
def list_admins(gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(admin_service.list_all(gateway))}


@router.get("/player/{player_id}", response_model=DataEnvelope[List[AdminResponse]])
def list_player_admin_roles(player_id: int, gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(admin_service.get_by_foreign_key(gateway, "player_id", player_id))}


@router.get("/{admin_id}", response_model=DataEnvelope[AdminResponse])
def read_admin(admin_id: int, gateway: TableGateway = Depends(get_gateway)):
    admin = unwrap(admin_service.get_by_id(gateway, admin_id), admin_service.not_found_message)
    return {"data": admin}


@router.post("", response_model=DataEnvelope[AdminResponse], status_code=status.HTTP_201_CREATED)
def create_admin(payload: AdminCreate, gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(admin_service.create(gateway, to_values(payload)))}


@router.put("/{admin_id}", response_model=DataEnvelope[AdminResponse])
def update_admin(admin_id: int, payload: AdminUpdate, gateway: TableGateway = Depends(get_gateway)):
    admin = unwrap(admin_service.update(gateway, admin_id, to_values(payload)), admin_service.not_found_message)
    return {"data": admin}


@router.delete("/{admin_id}", response_model=MessageEnvelope)
def delete_admin(admin_id: int, gateway: TableGateway = Depends(get_gateway)):
    unwrap(admin_service.delete(gateway, admin_id))
    return {"message": admin_service.deleted_message}
