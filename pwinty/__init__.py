"""
Typed client for the Pwinty print-fulfillment REST API.

Usage example:
    from pwinty import PwintyClient, OrderCreate, ShippingMethod
    with PwintyClient.sandbox(merchant_id, api_key) as client:
        order = client.create_order(
            OrderCreate.base("Best Customer Ever", "012345", "US", ShippingMethod.EXPRESS)
        )
"""

from .api_client import PwintyClient
from .clients import AsyncPwintyClient
from .exceptions import InternalError, PwintyError, RequestError, ResponseError
from .schemas import (
    Country,
    ImageAttributes,
    ImageResizingMethod,
    Order,
    OrderCreate,
    OrderImage,
    OrderImageAdd,
    OrderStatus,
    Payment,
    Shipment,
    ShippingCarrier,
    ShippingInfo,
    ShippingMethod,
)
from .utils import setup_logging

__version__ = "0.1.0"

__all__ = [
    # Clients
    "AsyncPwintyClient",
    "PwintyClient",
    # Errors
    "PwintyError",
    "InternalError",
    "RequestError",
    "ResponseError",
    # Payloads
    "Country",
    "ImageAttributes",
    "Order",
    "OrderCreate",
    "OrderImage",
    "OrderImageAdd",
    "Shipment",
    "ShippingInfo",
    # Enumerations
    "ImageResizingMethod",
    "OrderStatus",
    "Payment",
    "ShippingCarrier",
    "ShippingMethod",
    # Logging
    "setup_logging",
]
