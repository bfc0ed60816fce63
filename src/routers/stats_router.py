from typing import List

from fastapi import APIRouter, Depends, status

from src.schemas.envelope import DataEnvelope, MessageEnvelope
from src.schemas.stats_schema import StatsCreate, StatsUpdate, StatsResponse
from src.services.league_services import stats_service
from src.services.table_gateway import TableGateway, get_gateway
from src.utils.responses import unwrap, to_values

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=DataEnvelope[List[StatsResponse]])
def list_stats(gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(stats_service.list_all(gateway))}


@router.get("/player/{player_id}", response_model=DataEnvelope[List[StatsResponse]])
def list_player_stats(player_id: int, gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(stats_service.get_by_foreign_key(gateway, "player_id", player_id))}


@router.get("/season/{season_id}", response_model=DataEnvelope[List[StatsResponse]])
def list_season_stats(season_id: int, gateway: TableGateway = Depends(get_gateway)):
    """Tabla de la temporada: más puntos primero."""
    standings = stats_service.get_by_foreign_key(
        gateway, "season_id", season_id, order_by="points", ascending=False
    )
    return {"data": unwrap(standings)}


@router.get("/{stats_id}", response_model=DataEnvelope[StatsResponse])
def read_stats(stats_id: int, gateway: TableGateway = Depends(get_gateway)):
    stats = unwrap(stats_service.get_by_id(gateway, stats_id), stats_service.not_found_message)
    return {"data": stats}


@router.post("", response_model=DataEnvelope[StatsResponse], status_code=status.HTTP_201_CREATED)
def create_stats(payload: StatsCreate, gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(stats_service.create(gateway, to_values(payload)))}


@router.put("/{stats_id}", response_model=DataEnvelope[StatsResponse])
def update_stats(stats_id: int, payload: StatsUpdate, gateway: TableGateway = Depends(get_gateway)):
    stats = unwrap(stats_service.update(gateway, stats_id, to_values(payload)), stats_service.not_found_message)
    return {"data": stats}


@router.delete("/{stats_id}", response_model=MessageEnvelope)
def delete_stats(stats_id: int, gateway: TableGateway = Depends(get_gateway)):
    unwrap(stats_service.delete(gateway, stats_id))
    return {"message": stats_service.deleted_message}
