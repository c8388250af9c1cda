"""
services/offline_cache.py
Offline resource cache for the web front end, modelled on the service worker
lifecycle: two versioned cache generations (static + runtime), network-first
for documents, cache-first for everything else, and eviction of every other
generation when a new version activates.

Requests and responses are ``httpx`` objects; the live network is an
``httpx.AsyncClient`` so tests can plug an ``httpx.MockTransport``.
"""
from __future__ import annotations

import asyncio
import enum
import logging
import time
from typing import Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

SKIP_WAITING = "SKIP_WAITING"

# Headers that describe the wire encoding, not the stored body.
_WIRE_HEADERS = ("content-encoding", "content-length", "transfer-encoding")


def _cache_key(request: httpx.Request) -> str:
    return str(request.url).split("#", 1)[0]


def _detach(response: httpx.Response, request: httpx.Request) -> httpx.Response:
    """Copy a fully read response so the cache never shares a stream with the caller."""
    headers = [(k, v) for k, v in response.headers.multi_items()
               if k.lower() not in _WIRE_HEADERS]
    return httpx.Response(
        status_code=response.status_code,
        headers=headers,
        content=response.content,
        request=request,
    )


class Cache:
    """One named generation of stored request/response pairs. GET only."""

    def __init__(self, name: str):
        self.name = name
        self._entries: Dict[str, httpx.Response] = {}

    async def match(self, request: httpx.Request) -> Optional[httpx.Response]:
        stored = self._entries.get(_cache_key(request))
        return _detach(stored, request) if stored is not None else None

    async def put(self, request: httpx.Request, response: httpx.Response) -> None:
        if request.method != "GET":
            raise ValueError(f"only GET requests can be cached, got {request.method}")
        # last writer wins
        self._entries[_cache_key(request)] = _detach(response, request)

    async def delete(self, request: httpx.Request) -> bool:
        return self._entries.pop(_cache_key(request), None) is not None

    async def keys(self) -> List[str]:
        return list(self._entries)


class CacheStorage:
    """All cache generations of an origin, in creation order."""

    def __init__(self):
        self._caches: Dict[str, Cache] = {}

    async def open(self, name: str) -> Cache:
        if name not in self._caches:
            self._caches[name] = Cache(name)
        return self._caches[name]

    async def has(self, name: str) -> bool:
        return name in self._caches

    async def keys(self) -> List[str]:
        return list(self._caches)

    async def delete(self, name: str) -> bool:
        return self._caches.pop(name, None) is not None

    async def match(self, request: httpx.Request) -> Optional[httpx.Response]:
        for cache in list(self._caches.values()):
            hit = await cache.match(request)
            if hit is not None:
                return hit
        return None


class WorkerState(str, enum.Enum):
    PARSED = "parsed"
    INSTALLING = "installing"
    WAITING = "waiting"
    ACTIVATING = "activating"
    ACTIVE = "active"


def new_version() -> str:
    """A fresh version stamp per deployment (epoch milliseconds)."""
    return str(int(time.time() * 1000))


class OfflineCacheWorker:
    """
    Lifecycle: parsed -> installing -> (waiting) -> activating -> active.

    With ``skip_waiting_on_install`` the worker takes over right after install
    instead of waiting for existing clients to go away. Activation deletes
    every cache generation not tagged with this version; ``purge_all`` deletes
    every generation that existed before activation instead.
    """

    def __init__(
        self,
        storage: CacheStorage,
        client: httpx.AsyncClient,
        version: Optional[str] = None,
        prefix: str = "soulset",
        offline_path: str = "/index.html",
        html_accept_routing: bool = True,
        skip_waiting_on_install: bool = True,
        purge_all: bool = False,
    ):
        self.storage = storage
        self.client = client
        self.version = version or new_version()
        self.prefix = prefix
        self.offline_path = offline_path
        self.html_accept_routing = html_accept_routing
        self.skip_waiting_on_install = skip_waiting_on_install
        self.purge_all = purge_all

        self.state = WorkerState.PARSED
        self.controls_clients = False
        self._activated = asyncio.Event()

    # --- generation names ---
    @property
    def static_cache_name(self) -> str:
        return f"{self.prefix}-static-{self.version}"

    @property
    def runtime_cache_name(self) -> str:
        return f"{self.prefix}-runtime-{self.version}"

    def owns(self, cache_name: str) -> bool:
        return cache_name in (self.static_cache_name, self.runtime_cache_name)

    # --- lifecycle ---
    async def install(self) -> None:
        self.state = WorkerState.INSTALLING
        logger.info("[sw] installing %s", self.version)
        if self.skip_waiting_on_install:
            await self.skip_waiting()
        else:
            self.state = WorkerState.WAITING

    async def skip_waiting(self) -> None:
        if self.state in (WorkerState.INSTALLING, WorkerState.WAITING):
            await self.activate()

    async def activate(self) -> None:
        if self.state in (WorkerState.ACTIVATING, WorkerState.ACTIVE):
            await self._activated.wait()
            return
        self.state = WorkerState.ACTIVATING
        names = await self.storage.keys()
        stale = names if self.purge_all else [n for n in names if not self.owns(n)]
        await asyncio.gather(*(self.storage.delete(n) for n in stale))
        if stale:
            logger.info("[sw] evicted %d stale cache(s): %s", len(stale), ", ".join(stale))
        self.controls_clients = True  # clients.claim()
        self.state = WorkerState.ACTIVE
        self._activated.set()
        logger.info("[sw] active %s", self.version)

    async def handle_message(self, data) -> None:
        if data == SKIP_WAITING:
            await self.skip_waiting()

    # --- fetch routing ---
    def is_navigation(self, request: httpx.Request) -> bool:
        if request.headers.get("sec-fetch-mode", "").lower() == "navigate":
            return True
        if self.html_accept_routing and request.method == "GET":
            return "text/html" in request.headers.get("accept", "").lower()
        return False

    async def handle_fetch(self, request: httpx.Request) -> httpx.Response:
        if self.state == WorkerState.ACTIVATING:
            await self._activated.wait()
        if request.method != "GET":
            return await self.client.send(request)
        if self.is_navigation(request):
            return await self.network_first(request)
        return await self.cache_first(request)

    async def _fetch_fresh(self, request: httpx.Request) -> httpx.Response:
        fresh = httpx.Request(
            request.method,
            request.url,
            headers=[
                *((k, v) for k, v in request.headers.multi_items()
                  if k.lower() != "cache-control"),
                ("Cache-Control", "no-store"),
            ],
        )
        response = await self.client.send(fresh)
        await response.aread()
        return response

    async def network_first(self, request: httpx.Request) -> httpx.Response:
        cache = await self.storage.open(self.runtime_cache_name)
        try:
            response = await self._fetch_fresh(request)
        except httpx.TransportError as e:
            logger.warning("[sw] network failed for %s: %r", request.url, e)
            cached = await cache.match(request)
            if cached is None:
                cached = await self.storage.match(request)
            if cached is not None:
                return cached
            offline = await self.storage.match(
                httpx.Request("GET", request.url.join(self.offline_path))
            )
            if offline is not None:
                return offline
            return self._unavailable(request)
        if response.is_success:
            await cache.put(request, response)
        return response

    async def cache_first(self, request: httpx.Request) -> httpx.Response:
        cache = await self.storage.open(self.static_cache_name)
        cached = await cache.match(request)
        if cached is not None:
            return cached
        try:
            response = await self._fetch_fresh(request)
        except httpx.TransportError as e:
            logger.warning("[sw] network failed for %s: %r", request.url, e)
            return self._unavailable(request)
        if response.is_success:
            await cache.put(request, response)
        return response

    @staticmethod
    def _unavailable(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="Offline and not cached", request=request)
