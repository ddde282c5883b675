from dataclasses import dataclass, field
from typing import Any

from config import settings
from models.errors import WritePipelineError


@dataclass
class TransportOptions:
    rank: bool = settings.RPC_RANK
    rank_interval: float = settings.RPC_RANK_INTERVAL
    request_timeout: float = settings.RPC_REQUEST_TIMEOUT


@dataclass(frozen=True)
class RequestedSignature:
    pass


@dataclass(frozen=True)
class Signed:
    tx_hash: str


@dataclass(frozen=True)
class Confirmed:
    receipt: dict[str, Any]


@dataclass(frozen=True)
class Failed:
    error: WritePipelineError
    context: dict[str, Any]


WriteEvent = RequestedSignature | Signed | Confirmed | Failed


@dataclass
class WriteResult:
    receipt: dict[str, Any] | None = None
    tx_hash: str | None = None
    error: WritePipelineError | None = None
    events: list[WriteEvent] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.receipt is not None and self.error is None
