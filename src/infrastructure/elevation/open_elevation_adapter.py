"""Open-Elevation adapter for ElevationRepository.

Looks up ground elevation for a batch of points with a single POST to an
Open-Elevation compatible service (``/api/v1/lookup``), using httpx.

Request body::

    {"locations": [{"latitude": 28.61, "longitude": 77.20}, ...]}

Response body::

    {"results": [{"latitude": 28.61, "longitude": 77.20, "elevation": 216}, ...]}
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any

import httpx

from domain.geodesy.value_objects import GeoPoint
from domain.terrain.errors import ElevationLookupError

logger = logging.getLogger(__name__)

LOOKUP_PATH = "/api/v1/lookup"
DEFAULT_BASE_URL = "https://api.open-elevation.com"
DEFAULT_USER_AGENT = "tower-link-planner/0.1.0"


def _parse_elevation(raw: Any) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


class OpenElevationAdapter:
    """Infrastructure adapter for an Open-Elevation style HTTP service.

    Parameters
    ----------
    base_url: str
        Service root, without the lookup path.
    timeout_seconds: float
        Per-request timeout.
    client: httpx.Client | None
        Optional pre-built client (tests pass one with a MockTransport). When
        omitted, a short-lived client is opened per lookup.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._client = client

    def lookup(self, points: Sequence[GeoPoint]) -> tuple[float | None, ...]:
        """Return one elevation per point (meters), None where the service has none.

        Raises:
            ElevationLookupError: Malformed base URL, transport failure, non-2xx
                status, invalid JSON, or a result count that does not match
                the request
        """
        if not points:
            return ()

        payload = {
            "locations": [
                {"latitude": p.latitude, "longitude": p.longitude} for p in points
            ]
        }
        url = self.base_url + LOOKUP_PATH
        try:
            body = self._post_json(url, payload)
        except httpx.HTTPStatusError as e:
            raise ElevationLookupError(
                f"Elevation service returned HTTP {e.response.status_code}"
            ) from e
        except httpx.InvalidURL as e:
            raise ElevationLookupError(f"Invalid elevation service URL: {e}") from e
        except httpx.HTTPError as e:
            raise ElevationLookupError(f"Elevation service unreachable: {e}") from e
        except ValueError as e:
            raise ElevationLookupError("Elevation service returned invalid JSON") from e

        results = body.get("results") if isinstance(body, dict) else None
        if not isinstance(results, list) or len(results) != len(points):
            raise ElevationLookupError(
                f"Expected {len(points)} results, got "
                f"{len(results) if isinstance(results, list) else 'none'}"
            )

        elevations = tuple(
            _parse_elevation(r.get("elevation") if isinstance(r, dict) else None)
            for r in results
        )
        missing = sum(1 for e in elevations if e is None)
        if missing:
            logger.warning("Elevation lookup: %d of %d points without data", missing, len(points))
        logger.debug("Elevation lookup: %d points resolved", len(points) - missing)
        return elevations

    def _post_json(self, url: str, payload: dict[str, Any]) -> Any:
        headers = {"User-Agent": DEFAULT_USER_AGENT}
        if self._client is not None:
            resp = self._client.post(
                url, json=payload, headers=headers, timeout=self.timeout_seconds
            )
            resp.raise_for_status()
            return resp.json()

        with httpx.Client(timeout=self.timeout_seconds) as client:
            resp = client.post(url, json=payload, headers=headers)
            resp.raise_for_status()
            return resp.json()
