import asyncio
import logging
import time
from typing import Any

import aiohttp
from web3.exceptions import ProviderConnectionError
from web3.providers import AsyncBaseProvider, AsyncHTTPProvider
from web3.types import RPCEndpoint, RPCResponse

from clients.evm.dto import TransportOptions


module_logger = logging.getLogger(__name__)

FALLBACK_ERRORS = (
    aiohttp.ClientError,
    asyncio.TimeoutError,
    OSError,
    ProviderConnectionError,
)


class RankedFallbackProvider(AsyncBaseProvider):
    """Sends each request to the fastest healthy endpoint, falling back down the list.

    Endpoints are pinged with ``eth_blockNumber`` before the first request and again
    once ``rank_interval`` seconds have passed. Failed pings sort last, ties keep the
    configured order. JSON-RPC error responses are returned untouched, only transport
    failures move a request on to the next endpoint.
    """

    def __init__(
        self,
        endpoint_uris: list[str],
        options: TransportOptions | None = None,
        providers: list[Any] | None = None,
    ):
        super().__init__()
        if not endpoint_uris:
            raise ValueError("At least one RPC endpoint is required")

        self.options = options or TransportOptions()
        self.endpoint_uris = list(endpoint_uris)
        self._providers = providers or [
            AsyncHTTPProvider(
                uri,
                request_kwargs={
                    "timeout": aiohttp.ClientTimeout(total=self.options.request_timeout)
                },
            )
            for uri in self.endpoint_uris
        ]
        if len(self._providers) != len(self.endpoint_uris):
            raise ValueError("Each endpoint needs exactly one provider")

        self._latency: dict[str, float] = {}
        self._ranked: list[int] = list(range(len(self._providers)))
        self._ranked_at: float | None = None
        self._rank_lock = asyncio.Lock()

    def __str__(self) -> str:
        return f"RankedFallbackProvider({', '.join(self.endpoint_uris)})"

    @property
    def ranked_uris(self) -> list[str]:
        return [self.endpoint_uris[i] for i in self._ranked]

    @property
    def latencies(self) -> dict[str, float]:
        return dict(self._latency)

    async def _ping(self, index: int) -> float:
        start = time.perf_counter()
        try:
            response = await self._providers[index].make_request(
                RPCEndpoint("eth_blockNumber"), []
            )
        except Exception as e:
            module_logger.debug(f"Ping failed for {self.endpoint_uris[index]}: {e}")
            return float("inf")

        if "error" in response:
            return float("inf")

        return max(time.perf_counter() - start, 1e-6)

    async def rank_endpoints(self) -> list[str]:
        async with self._rank_lock:
            latencies = await asyncio.gather(
                *(self._ping(i) for i in range(len(self._providers)))
            )
            self._latency = dict(zip(self.endpoint_uris, latencies))
            self._ranked = sorted(range(len(self._providers)), key=lambda i: latencies[i])
            self._ranked_at = time.monotonic()

        module_logger.info(f"Ranked RPC endpoints: {self.ranked_uris}")
        return self.ranked_uris

    def _rank_expired(self) -> bool:
        if not self.options.rank:
            return False
        if self._ranked_at is None:
            return True
        return time.monotonic() - self._ranked_at >= self.options.rank_interval

    def _demote(self, index: int) -> None:
        self._latency[self.endpoint_uris[index]] = float("inf")
        if index in self._ranked:
            self._ranked.remove(index)
            self._ranked.append(index)

    async def make_request(self, method: RPCEndpoint, params: Any) -> RPCResponse:
        if self._rank_expired():
            await self.rank_endpoints()

        errors: list[str] = []
        for index in list(self._ranked):
            uri = self.endpoint_uris[index]
            try:
                return await self._providers[index].make_request(method, params)
            except FALLBACK_ERRORS as e:
                module_logger.warning(f"RPC {uri} failed on {method}, falling back: {e}")
                errors.append(f"{uri} -> {type(e).__name__}: {e}")
                self._demote(index)

        raise ProviderConnectionError(
            f"All RPC endpoints failed for {method}:\n" + "\n".join(errors)
        )

    async def is_connected(self, show_traceback: bool = False) -> bool:
        for provider in self._providers:
            try:
                if await provider.is_connected(show_traceback=show_traceback):
                    return True
            except Exception:
                continue
        return False

    async def disconnect(self) -> None:
        for provider in self._providers:
            await provider.disconnect()
