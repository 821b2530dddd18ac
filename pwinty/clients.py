# file: pwinty/clients.py
"""
Clients for the Pwinty REST API.

BaseClient holds what every client shares: credentials, URL building,
auth headers, payload encoding and response decoding. AsyncPwintyClient
sends requests with httpx; the blocking PwintyClient lives in api_client.py.

Usage:
    async with AsyncPwintyClient.sandbox(merchant_id, api_key) as client:
        order = await client.create_order(
            OrderCreate.base("Best Customer Ever", "012345", "US", ShippingMethod.EXPRESS)
        )
        images = await client.add_images_to_order(order.id, [image])
"""

import logging
from collections.abc import Iterable
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from . import config
from .exceptions import InternalError, RequestError, ResponseError
from .schemas import (
    Country,
    Envelope,
    ImageAddList,
    ImageBatch,
    Order,
    OrderCreate,
    OrderImage,
    OrderImageAdd,
)
from .utils import is_valid_header_value, mask_secret

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
C = TypeVar("C", bound="BaseClient")


class BaseClient:
    """
    Transport-independent part of a Pwinty client.

    Configuration is read-only after construction, so one instance can be
    shared between concurrent callers.
    """

    def __init__(
        self,
        base_url: str,
        merchant_id: str,
        api_key: str,
        timeout: Optional[float] = None,
    ):
        """
        Args:
            base_url: Sandbox or live API root, ending in "/".
            merchant_id: Pwinty merchant id.
            api_key: Pwinty REST API key.
            timeout: Per-request timeout in seconds (default: config).

        Raises:
            InternalError: If a credential is not a valid HTTP header value.
        """
        for name, value in (("merchant_id", merchant_id), ("api_key", api_key)):
            if not is_valid_header_value(value):
                raise InternalError(f"{name} is not a valid HTTP header value")

        self._base_url = base_url
        self._merchant_id = merchant_id
        self._api_key = api_key
        self.version = config.API_VERSION
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT

    @classmethod
    def sandbox(cls: type[C], merchant_id: str, api_key: str, **kwargs: Any) -> C:
        """Create a client for the sandbox deployment."""
        return cls(config.SANDBOX_API_BASE_URL, merchant_id, api_key, **kwargs)

    @classmethod
    def live(cls: type[C], merchant_id: str, api_key: str, **kwargs: Any) -> C:
        """Create a client for the live deployment."""
        return cls(config.LIVE_API_BASE_URL, merchant_id, api_key, **kwargs)

    @property
    def base_url(self) -> str:
        """API root this client was created for (sandbox or live)."""
        return self._base_url

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self._base_url!r}, "
            f"merchant_id={mask_secret(self._merchant_id)!r})"
        )

    def _url_for_endpoint(self, endpoint: str) -> str:
        return f"{self._base_url}{self.version}{endpoint}"

    def _headers(self, auth: bool) -> dict[str, str]:
        if not auth:
            return {}
        return {
            config.MERCHANT_ID_HEADER: self._merchant_id,
            config.API_KEY_HEADER: self._api_key,
            "Content-Type": config.JSON_CONTENT_TYPE,
            "Accept": config.JSON_CONTENT_TYPE,
        }

    @staticmethod
    def _encode_order(order: OrderCreate) -> bytes:
        """
        Serialize an order for the request body.

        Raises:
            InternalError: If the order cannot be validated or encoded.
        """
        try:
            if not isinstance(order, OrderCreate):
                order = OrderCreate.model_validate(order)
            return order.to_wire_json().encode("utf-8")
        except (ValidationError, PydanticSerializationError) as e:
            logger.error("Failed to serialize order: %s", e)
            raise InternalError(f"Failed to serialize order: {e}") from e

    @staticmethod
    def _prepare_images(
        order_id: int, images: Iterable[OrderImageAdd]
    ) -> tuple[str, bytes, type[BaseModel]]:
        """
        Pick the image endpoint and encode the body for it.

        One image goes to the single-image endpoint; two or more go to the
        batch endpoint, which answers with a different envelope.

        Args:
            order_id: Order to attach the images to.
            images: Image records to add.

        Returns:
            Tuple of (endpoint path, encoded body, envelope type).

        Raises:
            InternalError: If images is empty or cannot be encoded.
        """
        image_list = list(images)
        if not image_list:
            raise InternalError("Cannot add an empty list of images to an order")

        try:
            image_list = ImageAddList.validate_python(image_list)
            if len(image_list) == 1:
                body = image_list[0].to_wire_json().encode("utf-8")
            else:
                body = ImageAddList.dump_json(
                    image_list, by_alias=True, exclude_none=True
                )
        except (ValidationError, PydanticSerializationError) as e:
            logger.error("Failed to serialize images for order %s: %s", order_id, e)
            raise InternalError(f"Failed to serialize images: {e}") from e

        if len(image_list) == 1:
            return f"/orders/{order_id}/images", body, Envelope[OrderImage]
        return f"/orders/{order_id}/images/batch", body, Envelope[ImageBatch]

    @staticmethod
    def _image_results(envelope: Envelope) -> list[OrderImage]:
        if isinstance(envelope.data, ImageBatch):
            return list(envelope.data.items)
        return [envelope.data]

    @staticmethod
    def _check_status(status_code: int, method: str, url: str) -> None:
        if not 200 <= status_code < 300:
            logger.error("%s %s returned HTTP %d", method, url, status_code)
            raise ResponseError(status_code)

    @staticmethod
    def _decode(response_type: type[M], content: bytes, url: str) -> M:
        """
        Validate a JSON response body into its envelope type.

        Raises:
            InternalError: If the body is not JSON or does not match the type.
        """
        try:
            return response_type.model_validate_json(content)
        except ValidationError as e:
            logger.error("Invalid response body from %s: %s", url, e)
            raise InternalError(f"Failed to decode response from {url}: {e}") from e


class AsyncPwintyClient(BaseClient):
    """
    Async Pwinty client built on httpx.

    Each method is one request/response exchange. Nothing is retried;
    failures raise InternalError, RequestError or ResponseError.
    """

    def __init__(
        self,
        base_url: str,
        merchant_id: str,
        api_key: str,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            base_url: Sandbox or live API root, ending in "/".
            merchant_id: Pwinty merchant id.
            api_key: Pwinty REST API key.
            timeout: Per-request timeout in seconds (default: config).
            http_client: Shared httpx client. The caller keeps ownership;
                when omitted the client creates and closes its own.

        Raises:
            InternalError: If a credential is not a valid HTTP header value.
        """
        super().__init__(base_url, merchant_id, api_key, timeout=timeout)
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=self.timeout, follow_redirects=True
        )

    async def __aenter__(self) -> "AsyncPwintyClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    async def _request(
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
            response = await self._http.request(
                method,
                url,
                headers=self._headers(auth),
                content=body,
                timeout=self.timeout,
            )
        except httpx.RequestError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise RequestError(f"Request failed: {e}", original=e) from e

        self._check_status(response.status_code, method, url)
        return self._decode(response_type, response.content, url)

    async def countries(self) -> list[Country]:
        """
        List the countries the vendor ships to.

        Returns:
            Countries in server order.
        """
        envelope = await self._request(
            "/countries", "GET", False, Envelope[list[Country]]
        )
        logger.debug("Fetched %d countries", len(envelope.data))
        return envelope.data

    async def create_order(self, order: OrderCreate) -> Order:
        """
        Create a new order.

        Args:
            order: Order details; see OrderCreate.base for the minimum.

        Returns:
            The created order, including its server-assigned id.

        Raises:
            InternalError: If the order cannot be serialized (nothing is sent).
        """
        body = self._encode_order(order)
        envelope = await self._request(
            "/orders", "POST", True, Envelope[Order], body=body
        )
        logger.info("Created order %d", envelope.data.id)
        return envelope.data

    async def get_order(self, order_id: int) -> Order:
        """
        Fetch an existing order.

        Args:
            order_id: Server-assigned order id.

        Returns:
            Current snapshot of the order.
        """
        envelope = await self._request(
            f"/orders/{order_id}", "GET", True, Envelope[Order]
        )
        return envelope.data

    async def add_images_to_order(
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
        envelope = await self._request(endpoint, "POST", True, envelope_type, body=body)
        results = self._image_results(envelope)
        logger.info("Added %d image(s) to order %s", len(results), order_id)
        return results
