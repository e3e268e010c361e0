"""Riot Games API client."""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from config import Settings
from domain.enums import Region
from domain.errors import RiotAPIError
from .rate_limiter import EndpointRateLimiter, RateLimiter

logger = logging.getLogger(__name__)

_NOT_FOUND = object()


class RiotAPIClient:
    """Asynchronous Riot API client with rate limiting and a bounded retry policy.

    Results:
      - 200 → decoded JSON
      - 404 → None for a single match or account; fatal for a match id listing
      - 429 → wait Retry-After, retry
      - 5xx, timeouts, network errors → exponential backoff, then RiotAPIError
      - anything else, or an undecodable body → RiotAPIError
    """

    def __init__(
        self,
        api_key: str,
        *,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_backoff: float = 2.0,
        rate_limiter: Optional[EndpointRateLimiter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key       = api_key
        self.timeout       = timeout
        self.max_retries   = max_retries
        self.retry_backoff = retry_backoff
        self.session: Optional[httpx.AsyncClient] = None
        self.last_status_code: Optional[int] = None
        self._transport = transport
        self._endpoint_cooldown: dict[str, float] = {}
        self.rate_limiter = rate_limiter or EndpointRateLimiter()

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "RiotAPIClient":
        limiter = EndpointRateLimiter(
            RateLimiter(settings.rate_limit_per_1_sec, settings.rate_limit_per_2_min)
        )
        limiter.add_endpoint_limiter(
            "match",
            requests_per_1_sec=settings.rate_limit_per_1_sec,
            requests_per_2_min=settings.rate_limit_per_2_min,
        )
        return cls(
            settings.riot_api_key,
            timeout=settings.request_timeout,
            max_retries=settings.max_retries,
            retry_backoff=settings.retry_backoff,
            rate_limiter=limiter,
            **kwargs,
        )

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"X-Riot-Token": self.api_key},
            http2=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    def _get_regional_url(self, region: Region) -> str:
        return f"https://{region.regional_route}.api.riotgames.com"

    def _get_account_url(self, region: Region) -> str:
        return f"https://{region.account_route}.api.riotgames.com"

    async def _backoff(self, attempt: int) -> None:
        await asyncio.sleep(self.retry_backoff ** attempt)

    async def _make_request(
        self,
        url: str,
        endpoint_type: str = "default",
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        if self.session is None:
            raise RuntimeError("RiotAPIClient must be used as an async context manager")

        last_error = "no attempt made"
        for attempt in range(self.max_retries + 1):
            # honour per-endpoint cooldown after 429
            cd = self._endpoint_cooldown.get(endpoint_type, 0.0)
            now = time.monotonic()
            if cd > now:
                await asyncio.sleep(cd - now)

            await self.rate_limiter.acquire(endpoint_type)

            try:
                response = await self.session.get(url, params=params)
            except httpx.TimeoutException as exc:
                last_error = f"timeout: {exc}"
                logger.warning(f"Timeout for {url} (attempt {attempt + 1})")
                if attempt < self.max_retries:
                    await self._backoff(attempt)
                continue
            except httpx.HTTPError as exc:
                last_error = f"network error: {exc}"
                logger.warning(f"Network error for {url}: {exc}")
                if attempt < self.max_retries:
                    await self._backoff(attempt)
                continue

            self.last_status_code = response.status_code

            if response.status_code == 200:
                try:
                    return response.json()
                except ValueError as exc:
                    raise RiotAPIError(f"Invalid JSON from {url}: {exc}", 200, url) from exc

            if response.status_code == 404:
                return _NOT_FOUND

            if response.status_code in (401, 403):
                raise RiotAPIError(
                    f"HTTP {response.status_code} — check RGAPI_KEY", response.status_code, url
                )

            if response.status_code == 429:
                try:
                    retry_after = int(response.headers.get("Retry-After", "5"))
                except ValueError:
                    retry_after = 5
                logger.warning(f"429 rate-limited — waiting {retry_after}s")
                last_error = "HTTP 429"
                self._endpoint_cooldown[endpoint_type] = time.monotonic() + retry_after
                await self.rate_limiter.reset_endpoint(endpoint_type)
                continue

            if response.status_code >= 500:
                last_error = f"HTTP {response.status_code}"
                logger.warning(f"HTTP {response.status_code} for {url} (attempt {attempt + 1})")
                if attempt < self.max_retries:
                    await self._backoff(attempt)
                continue

            raise RiotAPIError(f"HTTP {response.status_code} for {url}", response.status_code, url)

        raise RiotAPIError(
            f"Giving up on {url} after {self.max_retries + 1} attempts ({last_error})",
            self.last_status_code,
            url,
        )

    # ── Account API ────────────────────────────────────────────────────

    async def get_account_by_riot_id(
        self, region: Region, game_name: str, tag_line: str
    ) -> Optional[Dict]:
        base = self._get_account_url(region)
        url  = (
            f"{base}/riot/account/v1/accounts/by-riot-id/"
            f"{quote(game_name, safe='')}/{quote(tag_line, safe='')}"
        )
        result = await self._make_request(url, "account")
        if result is _NOT_FOUND:
            return None
        if not isinstance(result, dict):
            raise RiotAPIError(f"Unexpected account payload from {url}", 200, url)
        return result

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids_by_puuid(
        self,
        region: Region,
        puuid: str,
        start_time: Optional[int] = None,
        end_time:   Optional[int] = None,
        start: int = 0,
        count: Optional[int] = None,
    ) -> List[str]:
        base   = self._get_regional_url(region)
        params: Dict[str, Any] = {"start": start}
        if count is not None:
            params["count"] = min(count, 100)
        if start_time is not None:
            params["startTime"] = start_time
        if end_time is not None:
            params["endTime"] = end_time
        url    = f"{base}/lol/match/v5/matches/by-puuid/{puuid}/ids"
        result = await self._make_request(url, "match", params=params)
        if result is _NOT_FOUND:
            # an empty listing is a 200 with []; a 404 means the request itself failed
            raise RiotAPIError(f"HTTP 404 for {url}", 404, url)
        if not isinstance(result, list) or not all(isinstance(m, str) for m in result):
            raise RiotAPIError(f"Unexpected match id payload from {url}", 200, url)
        return result

    async def get_match_by_id(self, region: Region, match_id: str) -> Optional[Dict]:
        base   = self._get_regional_url(region)
        result = await self._make_request(f"{base}/lol/match/v5/matches/{match_id}", "match")
        return None if result is _NOT_FOUND else result
