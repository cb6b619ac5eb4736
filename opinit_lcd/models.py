"""
Data models for the OPinit LCD client.
"""
from typing import Dict, Any, Optional, List
from pydantic import BaseModel, ConfigDict, Field


class TxInfo(BaseModel):
    """Result of a transaction that has been included in a block"""
    txhash: str
    height: int
    code: int = 0
    codespace: str = ""
    raw_log: str = ""
    gas_wanted: int = 0
    gas_used: int = 0
    timestamp: Optional[str] = None
    logs: List[Dict[str, Any]] = Field(default_factory=list)
    events: List[Dict[str, Any]] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.code == 0


class BroadcastResult(BaseModel):
    """Response of a sync broadcast; code 0 means the node accepted the tx"""
    txhash: str
    code: int = 0
    codespace: str = ""
    raw_log: str = ""
    height: int = 0


class MoveResource(BaseModel):
    """Move resource stored under an account"""
    type: str
    data: Dict[str, Any]


class AccountInfo(BaseModel):
    """Signing state of an account"""
    address: str
    account_number: int
    sequence: int


class BridgeConfig(BaseModel):
    """Config store of a bridge, as returned by 0x1::op_output::get_config_store"""
    model_config = ConfigDict(frozen=True, extra="allow")

    submission_interval: Optional[int] = None
    finalization_period: Optional[int] = None
    submission_start_time: Optional[int] = None
    proposer: Optional[str] = None
    challenger: Optional[str] = None


class CoinInfoResource(BaseModel):
    """Data of a 0x1::coin::CoinInfo<T> resource"""
    name: str
    symbol: str
    decimals: int


class CoinInfo(BaseModel):
    """Coin metadata merged with the L2 denom of the token"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    struct_tag: str = Field(..., alias="structTag")
    denom: str
    name: str
    symbol: str
    decimals: int
