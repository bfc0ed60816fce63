from typing import List

from fastapi import APIRouter, Depends, status

from src.schemas.envelope import DataEnvelope, MessageEnvelope
from src.schemas.season_schema import SeasonCreate, SeasonUpdate, SeasonResponse
from src.services.auth_service import require_admin
from src.services.league_services import season_service
from src.services.table_gateway import TableGateway, get_gateway
from src.utils.responses import unwrap, to_values

router = APIRouter(prefix="/seasons", tags=["seasons"])


@router.get("", response_model=DataEnvelope[List[SeasonResponse]])
def list_seasons(gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(season_service.list_all(gateway))}


@router.get("/{season_id}", response_model=DataEnvelope[SeasonResponse])
def read_season(season_id: int, gateway: TableGateway = Depends(get_gateway)):
    season = unwrap(season_service.get_by_id(gateway, season_id), season_service.not_found_message)
    return {"data": season}


# Escrituras: token válido + fila en admin
@router.post(
    "",
    response_model=DataEnvelope[SeasonResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_season(payload: SeasonCreate, gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(season_service.create(gateway, to_values(payload)))}


@router.put("/{season_id}", response_model=DataEnvelope[SeasonResponse], dependencies=[Depends(require_admin)])
def update_season(season_id: int, payload: SeasonUpdate, gateway: TableGateway = Depends(get_gateway)):
    season = unwrap(
        season_service.update(gateway, season_id, to_values(payload)),
        season_service.not_found_message,
    )
    return {"data": season}


@router.delete("/{season_id}", response_model=MessageEnvelope, dependencies=[Depends(require_admin)])
def delete_season(season_id: int, gateway: TableGateway = Depends(get_gateway)):
    unwrap(season_service.delete(gateway, season_id))
    return {"message": season_service.deleted_message}
