from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from espn_ff.errors import TransportError
from espn_ff.settings import Settings


logger = logging.getLogger(__name__)


@dataclass
class EspnClient:
    """
    The only place that touches the network. Models hand it a route and
    query params and get decoded JSON back.
    """

    settings: Settings
    session: requests.Session

    @classmethod
    def from_local_config(cls) -> "EspnClient":
        return cls.from_settings(Settings.from_local_config())

    @classmethod
    def from_settings(cls, settings: Settings) -> "EspnClient":
        session = requests.Session()
        session.headers.update({"Accept": "application/json"})
        return cls(settings=settings, session=session)

    def url_for(self, route: str) -> str:
        return self.settings.base_url.rstrip("/") + "/" + route.lstrip("/")

    def get(
        self,
        route: str,
        *,
        params: Optional[dict] = None,
        timeout: Optional[int] = None,
    ) -> Dict[str, Any]:
        url = self.url_for(route)
        logger.info("GET %s params=%s", url, params)

        try:
            resp = self.session.get(
                url,
                params=params,
                timeout=timeout or self.settings.timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            status_code = e.response.status_code if e.response is not None else None
            logger.warning("GET %s failed: %s", url, e)
            raise TransportError(f"GET {url} failed: {e}", url=url, status_code=status_code) from e

        try:
            return resp.json()
        except ValueError as e:
            logger.warning("GET %s returned a non-JSON body", url)
            raise TransportError(
                f"GET {url} returned invalid JSON", url=url, status_code=resp.status_code
            ) from e
