from typing import Optional

import httpx


class _ClientStore:
    client: Optional[httpx.AsyncClient] = None


def set_http_client(client: httpx.AsyncClient) -> None:
    _ClientStore.client = client


def get_http_client() -> httpx.AsyncClient:
    if _ClientStore.client is None:
        _ClientStore.client = httpx.AsyncClient()
    return _ClientStore.client


async def close_http_client() -> None:
    if _ClientStore.client is not None:
        await _ClientStore.client.aclose()
        _ClientStore.client = None
