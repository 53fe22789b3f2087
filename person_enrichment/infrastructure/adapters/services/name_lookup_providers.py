from typing import Any, Dict

import httpx

from person_enrichment.domain.exceptions import ProviderError
from person_enrichment.domain.ports.services.attribute_provider import AttributeProvider


class HttpNameLookupProvider(AttributeProvider):
    """GETs ``<url>?name=<name>`` and reads one field from the JSON object returned."""

    name = "lookup"

    def __init__(self, client: httpx.AsyncClient, url: str):
        self.client = client
        self.url = url

    async def _get_json(self, name: str) -> Dict[str, Any]:
        try:
            response = await self.client.get(self.url, params={"name": name})
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            raise ProviderError(f"{self.name} request failed: {e}") from e
        except ValueError as e:
            raise ProviderError(f"{self.name} returned malformed JSON") from e

        if not isinstance(body, dict):
            raise ProviderError(f"{self.name} returned {type(body).__name__}, expected an object")
        return body


class AgifyProvider(HttpNameLookupProvider):
    name = "agify"

    async def fetch(self, name: str) -> int:
        body = await self._get_json(name)
        age = body.get("age")
        if isinstance(age, bool) or not isinstance(age, (int, float)):
            raise ProviderError(f"agify response has no numeric age: {body!r}")
        return int(age)


class GenderizeProvider(HttpNameLookupProvider):
    name = "genderize"

    async def fetch(self, name: str) -> str:
        body = await self._get_json(name)
        gender = body.get("gender")
        if not isinstance(gender, str):
            raise ProviderError(f"genderize response has no gender: {body!r}")
        return gender


class NationalizeProvider(HttpNameLookupProvider):
    name = "nationalize"

    async def fetch(self, name: str) -> str:
        body = await self._get_json(name)
        countries = body.get("country")
        if not isinstance(countries, list) or not countries:
            raise ProviderError(f"nationalize response has no countries: {body!r}")

        first = countries[0]
        country_id = first.get("country_id") if isinstance(first, dict) else None
        if not isinstance(country_id, str):
            raise ProviderError(f"nationalize country entry has no country_id: {first!r}")
        return country_id
