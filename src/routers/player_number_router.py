from typing import List

from fastapi import APIRouter, Depends, status

from src.schemas.envelope import DataEnvelope, MessageEnvelope
from src.schemas.player_number_schema import PlayerNumberCreate, PlayerNumberUpdate, PlayerNumberResponse
from src.services.league_services import player_number_service
from src.services.table_gateway import TableGateway, get_gateway
from src.utils.responses import unwrap, to_values

router = APIRouter(prefix="/player-numbers", tags=["player numbers"])


@router.get("", response_model=DataEnvelope[List[PlayerNumberResponse]])
def list_player_numbers(gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(player_number_service.list_all(gateway))}


@router.get("/player/{player_id}", response_model=DataEnvelope[List[PlayerNumberResponse]])
def list_player_numbers_for_player(player_id: int, gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(player_number_service.get_by_foreign_key(gateway, "player_id", player_id))}


@router.get("/{number_id}", response_model=DataEnvelope[PlayerNumberResponse])
def read_player_number(number_id: int, gateway: TableGateway = Depends(get_gateway)):
    number = unwrap(
        player_number_service.get_by_id(gateway, number_id),
        player_number_service.not_found_message,
    )
    return {"data": number}


@router.post("", response_model=DataEnvelope[PlayerNumberResponse], status_code=status.HTTP_201_CREATED)
def create_player_number(payload: PlayerNumberCreate, gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(player_number_service.create(gateway, to_values(payload)))}


@router.put("/{number_id}", response_model=DataEnvelope[PlayerNumberResponse])
def update_player_number(number_id: int, payload: PlayerNumberUpdate, gateway: TableGateway = Depends(get_gateway)):
    number = unwrap(
        player_number_service.update(gateway, number_id, to_values(payload)),
        player_number_service.not_found_message,
    )
    return {"data": number}


@router.delete("/{number_id}", response_model=MessageEnvelope)
def delete_player_number(number_id: int, gateway: TableGateway = Depends(get_gateway)):
    unwrap(player_number_service.delete(gateway, number_id))
    return {"message": player_number_service.deleted_message}
