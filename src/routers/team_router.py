from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from src.schemas.envelope import DataEnvelope, MessageEnvelope
from src.schemas.team_schema import TeamCreate, TeamUpdate, TeamResponse
from src.services.league_services import team_service
from src.services.table_gateway import TableGateway, get_gateway
from src.utils.responses import unwrap, to_values

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("", response_model=DataEnvelope[List[TeamResponse]])
def list_teams(gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(team_service.list_all(gateway))}


@router.get("/{team_id}", response_model=DataEnvelope[TeamResponse])
def read_team(team_id: str, gateway: TableGateway = Depends(get_gateway)):
    team = unwrap(team_service.get_by_id(gateway, team_id), team_service.not_found_message)
    return {"data": team}


@router.post("", response_model=DataEnvelope[TeamResponse], status_code=status.HTTP_201_CREATED)
def create_team(payload: TeamCreate, gateway: TableGateway = Depends(get_gateway)):
    if not payload.name or not payload.name.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Team name is required")
    return {"data": unwrap(team_service.create(gateway, to_values(payload)))}


@router.put("/{team_id}", response_model=DataEnvelope[TeamResponse])
def update_team(team_id: str, payload: TeamUpdate, gateway: TableGateway = Depends(get_gateway)):
    team = unwrap(team_service.update(gateway, team_id, to_values(payload)), team_service.not_found_message)
    return {"data": team}


@router.delete("/{team_id}", response_model=MessageEnvelope)
def delete_team(team_id: str, gateway: TableGateway = Depends(get_gateway)):
    unwrap(team_service.delete(gateway, team_id))
    return {"message": team_service.deleted_message}
