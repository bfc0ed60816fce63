from typing import List

from fastapi import APIRouter, Depends, status

from src.schemas.envelope import DataEnvelope, MessageEnvelope
from src.schemas.payment_schema import PaymentCreate, PaymentUpdate, PaymentResponse
from src.services.league_services import payment_service
from src.services.table_gateway import TableGateway, get_gateway
from src.utils.responses import unwrap, to_values

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("", response_model=DataEnvelope[List[PaymentResponse]])
def list_payments(gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(payment_service.list_all(gateway))}


@router.get("/debt", response_model=DataEnvelope[List[PaymentResponse]])
def list_payments_with_debt(gateway: TableGateway = Depends(get_gateway)):
    """Jugadores con deuda, el que más debe primero."""
    debtors = payment_service.list_where(gateway, {"debt": True}, order_by="total_debt", ascending=False)
    return {"data": unwrap(debtors)}


@router.get("/player/{player_id}", response_model=DataEnvelope[List[PaymentResponse]])
def list_player_payments(player_id: int, gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(payment_service.get_by_foreign_key(gateway, "player_id", player_id))}


@router.get("/{payment_id}", response_model=DataEnvelope[PaymentResponse])
def read_payment(payment_id: int, gateway: TableGateway = Depends(get_gateway)):
    payment = unwrap(payment_service.get_by_id(gateway, payment_id), payment_service.not_found_message)
    return {"data": payment}


@router.post("", response_model=DataEnvelope[PaymentResponse], status_code=status.HTTP_201_CREATED)
def create_payment(payload: PaymentCreate, gateway: TableGateway = Depends(get_gateway)):
    return {"data": unwrap(payment_service.create(gateway, to_values(payload)))}


@router.put("/{payment_id}", response_model=DataEnvelope[PaymentResponse])
def update_payment(payment_id: int, payload: PaymentUpdate, gateway: TableGateway = Depends(get_gateway)):
    payment = unwrap(
        payment_service.update(gateway, payment_id, to_values(payload)),
        payment_service.not_found_message,
    )
    return {"data": payment}


@router.delete("/{payment_id}", response_model=MessageEnvelope)
def delete_payment(payment_id: int, gateway: TableGateway = Depends(get_gateway)):
    unwrap(payment_service.delete(gateway, payment_id))
    return {"message": payment_service.deleted_message}
