from typing import List

from fastapi import APIRouter, Depends, status

from src.schemas.envelope import DataEnvelope, MessageEnvelope
from src.schemas.affiliation_schema import AffiliationCreate, AffiliationUpdate, AffiliationResponse
from src.services.league_services import affiliation_service
from src.services.table_gateway import TableGateway, get_gateway
from src.utils.responses import unwrap, to_values

router = APIRouter(prefix="/affiliations", tags=["affiliations"])


@router.get("", response_model=DataEnvelope[List[AffiliationResponse]])
def list_affiliations(gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(affiliation_service.list_all(gateway))}


@router.get("/player/{player_id}", response_model=DataEnvelope[List[AffiliationResponse]])
def list_player_affiliations(player_id: int, gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(affiliation_service.get_by_foreign_key(gateway, "player_id", player_id))}


@router.get("/{affiliation_id}", response_model=DataEnvelope[AffiliationResponse])
def read_affiliation(affiliation_id: int, gateway: TableGateway = Depends(get_gateway)):
    affiliation = unwrap(
        affiliation_service.get_by_id(gateway, affiliation_id),
        affiliation_service.not_found_message,
    )
    return {"data": affiliation}


@router.post("", response_model=DataEnvelope[AffiliationResponse], status_code=status.HTTP_201_CREATED)
def create_affiliation(payload: AffiliationCreate, gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(affiliation_service.create(gateway, to_values(payload)))}


@router.put("/{affiliation_id}", response_model=DataEnvelope[AffiliationResponse])
def update_affiliation(affiliation_id: int, payload: AffiliationUpdate, gateway: TableGateway = Depends(get_gateway)):
    affiliation = unwrap(
        affiliation_service.update(gateway, affiliation_id, to_values(payload)),
        affiliation_service.not_found_message,
    )
    return {"data": affiliation}


@router.delete("/{affiliation_id}", response_model=MessageEnvelope)
def delete_affiliation(affiliation_id: int, gateway: TableGateway = Depends(get_gateway)):
    unwrap(affiliation_service.delete(gateway, affiliation_id))
    return {"message": affiliation_service.deleted_message}
