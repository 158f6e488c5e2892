from __future__ import annotations

from fastapi import APIRouter, Depends

from api.deps import get_balance_service
from api.schemas.balance import ErrorResponse, TokenBalanceRequest, TokenBalanceResponse
from app.balance.formatter import balance_payload
from app.balance.service import BalanceQueryService

router = APIRouter(prefix="/token-balance", tags=["balance"])


@router.post(
    "",
    response_model=TokenBalanceResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def token_balance(
    req: TokenBalanceRequest,
    service: BalanceQueryService = Depends(get_balance_service),
) -> TokenBalanceResponse:
    # QueryError propagates to the app-level handler -> {"error": ...}
    result = service.query_balance(req.contractAddress, req.walletAddress)
    return TokenBalanceResponse(success=True, data=balance_payload(result))
