# file: pwinty/api_client.py
"""Blocking HTTP client for the Pwinty API, built on requests."""

import logging
from collections.abc import Iterable
from typing import Any, Optional

import requests

from .clients import BaseClient, M
from .exceptions import RequestError
from .schemas import Country, Envelope, Order, OrderCreate, OrderImage, OrderImageAdd

logger = logging.getLogger(__name__)


class PwintyClient(BaseClient):
    """
    Blocking counterpart of AsyncPwintyClient with the same methods and errors.
    """

    def __init__(
        self,
        base_url: str,
        merchant_id: str,
        api_key: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(base_url, merchant_id, api_key, timeout=timeout)
        self._owns_session = session is None
        self._session = session or requests.Session()

    def __enter__(self) -> "PwintyClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session if this instance created it."""
        if self._owns_session:
            self._session.close()

    def _request(
        self,
        endpoint: str,
        method: str,
        auth: bool,
        response_type: type[M],
        body: Optional[bytes] = None,
    ) -> M:
        url = self._url_for_endpoint(endpoint)
        logger.debug("%s %s", method, url)
        try:
            resp = self._session.request(
                method,
                url,
                headers=self._headers(auth),
                data=body,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise RequestError(f"Request failed: {e}", original=e) from e

        self._check_status(resp.status_code, method, url)
        return self._decode(response_type, resp.content, url)

    def countries(self) -> list[Country]:
        """List the countries the vendor ships to."""
        return self._request("/countries", "GET", False, Envelope[list[Country]]).data

    def create_order(self, order: OrderCreate) -> Order:
        """Create a new order. Returns the order with its server-assigned id."""
        body = self._encode_order(order)
        created = self._request("/orders", "POST", True, Envelope[Order], body=body).data
        logger.info("Created order %d", created.id)
        return created

    def get_order(self, order_id: int) -> Order:
        """Fetch an existing order by id."""
        return self._request(f"/orders/{order_id}", "GET", True, Envelope[Order]).data

    def add_images_to_order(
        self, order_id: int, images: Iterable[OrderImageAdd]
    ) -> list[OrderImage]:
        """
        Attach one or more images to an order.

        Args:
            order_id: Server-assigned order id.
            images: Non-empty sequence of images to add.

        Returns:
            The added images in server order, always as a list.

        Raises:
            InternalError: If images is empty (nothing is sent).
        """
        endpoint, body, envelope_type = self._prepare_images(order_id, images)
        envelope = self._request(endpoint, "POST", True, envelope_type, body=body)
        results = self._image_results(envelope)
        logger.info("Added %d image(s) to order %s", len(results), order_id)
        return results
