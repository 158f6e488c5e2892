from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TokenBalanceRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    contractAddress: str
    walletAddress: str


class NetworkRead(BaseModel):
    name: str
    chainId: int
    rpcUrl: str
    explorerUrl: str
    nativeSymbol: str


class TokenBalanceData(BaseModel):
    tokenName: str
    tokenSymbol: str
    tokenDecimals: int
    # integers travel as decimal strings
    balance: str
    rawBalance: str
    nativeBalance: str
    nativeBalanceWei: str
    contractAddress: str
    walletAddress: str
    network: NetworkRead
    explorerUrl: str


class TokenBalanceResponse(BaseModel):
    success: bool = True
    data: TokenBalanceData


class ErrorResponse(BaseModel):
    error: str
