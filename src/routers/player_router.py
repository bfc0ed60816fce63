from typing import List

from fastapi import APIRouter, Depends, status

from src.schemas.envelope import DataEnvelope, MessageEnvelope
from src.schemas.player_schema import PlayerCreate, PlayerUpdate, PlayerResponse
from src.services.league_services import player_service
from src.services.table_gateway import TableGateway, get_gateway
from src.utils.responses import unwrap, to_values

router = APIRouter(prefix="/players", tags=["players"])


@router.get("", response_model=DataEnvelope[List[PlayerResponse]])
def list_players(gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(player_service.list_all(gateway))}


@router.get("/team/{team_id}", response_model=DataEnvelope[List[PlayerResponse]])
def list_team_players(team_id: str, gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(player_service.get_by_foreign_key(gateway, "team_id", team_id))}


@router.get("/{player_id}", response_model=DataEnvelope[PlayerResponse])
def read_player(player_id: int, gateway: TableGateway = Depends(get_gateway)):
    player = unwrap(player_service.get_by_id(gateway, player_id), player_service.not_found_message)
    return {"data": player}


@router.post("", response_model=DataEnvelope[PlayerResponse], status_code=status.HTTP_201_CREATED)
def create_player(payload: PlayerCreate, gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(player_service.create(gateway, to_values(payload)))}


@router.put("/{player_id}", response_model=DataEnvelope[PlayerResponse])
def update_player(player_id: int, payload: PlayerUpdate, gateway: TableGateway = Depends(get_gateway)):
    player = unwrap(
        player_service.update(gateway, player_id, to_values(payload)),
        player_service.not_found_message,
    )
    return {"data": player}


@router.delete("/{player_id}", response_model=MessageEnvelope)
def delete_player(player_id: int, gateway: TableGateway = Depends(get_gateway)):
    unwrap(player_service.delete(gateway, player_id))
    return {"message": player_service.deleted_message}
