"""Contentful Delivery API adapter."""

import logging
from typing import Any

import requests

from ..core.model import AssetId, AssetRecord
from ..core.ports import AssetRepository

logger = logging.getLogger(__name__)

DEFAULT_HOST = "cdn.contentful.com"


class ContentfulAPIError(RuntimeError):
    """A Contentful request failed or returned a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ContentDeliveryClient(AssetRepository):
    """
    Minimal read-only client for the asset and entry collections of one
    space/environment. Works against the Preview API too when ``host`` is
    ``preview.contentful.com`` and a preview token is supplied.
    """

    def __init__(
        self,
        space_id: str,
        access_token: str,
        environment: str = "master",
        host: str = DEFAULT_HOST,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.space_id = space_id
        self.environment = environment
        self.base_url = f"https://{host}/spaces/{space_id}/environments/{environment}"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
        })

    def list_assets(
        self, skip: int, limit: int, order: str = "sys.createdAt"
    ) -> list[AssetRecord]:
        data = self._get("/assets", {"skip": skip, "limit": limit, "order": order})
        return [AssetRecord.from_api(item) for item in data.get("items", [])]

    def count_entries_linking(self, asset_id: AssetId, limit: int = 1) -> int:
        data = self._get("/entries", {"links_to_asset": asset_id, "limit": limit})
        total = data.get("total")
        # A missing total must not read as "no entries link here"
        if not isinstance(total, int) or isinstance(total, bool):
            raise ContentfulAPIError(
                f"Contentful response for asset {asset_id} has no usable total: {total!r}"
            )
        return total

    def close(self) -> None:
        self.session.close()

    def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s %s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise ContentfulAPIError(f"Contentful request failed: {e}") from e

        logger.debug("GET %s -> %s", url, response.status_code)
        if response.status_code != 200:
            raise ContentfulAPIError(
                f"Contentful API error {response.status_code}: {_error_message(response)}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise ContentfulAPIError(
                f"Contentful returned invalid JSON for {path}",
                status_code=response.status_code,
            ) from e


def _error_message(response: requests.Response) -> str:
    """Pull the ``message`` field out of a Contentful error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason or "unknown error"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason or "unknown error"
