# file: pwinty/schemas.py
"""
Pydantic models for the Pwinty API.

Defines the request payloads sent to the API, the records it returns,
the vendor's closed enumerations, and the {"data": ...} response envelopes.
Attribute names are snake_case; the wire format is camelCase.
"""

from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ShippingMethod(str, Enum):
    """Shipping speed requested for an order."""

    BUDGET = "Budget"
    STANDARD = "Standard"
    EXPRESS = "Express"
    OVERNIGHT = "Overnight"


class Payment(str, Enum):
    """Who is invoiced for an order."""

    INVOICE_ME = "InvoiceMe"
    INVOICE_RECIPIENT = "InvoiceRecipient"


class OrderStatus(str, Enum):
    """Order and image status as reported by the server."""

    NOT_YET_DOWNLOADED = "NotYetDownloaded"
    NOT_YET_SUBMITTED = "NotYetSubmitted"
    SUBMITTED = "Submitted"
    AWAITING_PAYMENT = "AwaitingPayment"
    COMPLETE = "Complete"
    CANCELLED = "Cancelled"


class ShippingCarrier(str, Enum):
    """Carrier used for a shipment."""

    ROYAL_MAIL = "RoyalMail"
    ROYAL_MAIL_FIRST_CLASS = "RoyalMailFirstClass"
    ROYAL_MAIL_SECOND_CLASS = "RoyalMailSecondClass"
    FEDEX = "FedEx"
    FEDEX_UK = "FedExUK"
    FEDEX_INTL = "FedExIntl"
    INTERLINK = "Interlink"
    UPS = "UPS"
    UPS_TWO_DAY = "UpsTwoDay"
    UK_MAIL = "UKMail"
    TNT = "TNT"
    PARCEL_FORCE = "ParcelForce"
    DHL = "DHL"
    UPS_MI = "UPSMI"
    DPD_NEXT_DAY = "DpdNextDay"
    EU_POSTAL = "EuPostal"
    AU_POST = "AuPost"
    AIR_MAIL = "AirMail"
    NOT_KNOWN = "NotKnown"


class ImageResizingMethod(str, Enum):
    """How an image is fitted to the print size."""

    CROP = "Crop"
    SHRINK_TO_FIT = "ShrinkToFit"
    SHRINK_TO_EXACT_FIT = "ShrinkToExactFit"


class WireModel(BaseModel):
    """Base for all API payloads: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire_json(self) -> str:
        """
        Serialize for a request body.

        Returns:
            JSON string with camelCase keys and absent fields omitted.
        """
        return self.model_dump_json(by_alias=True, exclude_none=True)


class Snapshot(WireModel):
    """Base for records returned by the API. Instances are read-only."""

    model_config = ConfigDict(frozen=True)


# Shared


class ImageAttributes(WireModel):
    """Product-specific attributes attached to an image."""

    substrate_weight: Optional[str] = None
    frame: Optional[str] = None
    edge: Optional[str] = None
    paper_type: Optional[str] = None
    frame_colour: Optional[str] = None


# Outbound


class OrderCreate(WireModel):
    """Request body for creating a new order."""

    merchant_order_id: Optional[int] = Field(
        default=None, description="Merchant's own reference for the order"
    )
    recipient_name: str
    address1: Optional[str] = None
    address2: Optional[str] = None
    address_town_or_city: Optional[str] = None
    state_or_county: Optional[str] = None
    postal_or_zip_code: str
    country_code: str = Field(description="Two-letter ISO country code")
    preferred_shipping_method: ShippingMethod
    payment: Optional[Payment] = None
    packing_slip_url: Optional[str] = None
    mobile_telephone: Optional[str] = None
    email: Optional[str] = None
    invoice_amount_net: Optional[float] = None
    invoice_tax: Optional[float] = None
    invoice_currency: Optional[str] = None

    @classmethod
    def base(
        cls,
        recipient_name: str,
        postal_or_zip_code: str,
        country_code: str,
        preferred_shipping_method: ShippingMethod,
    ) -> "OrderCreate":
        """
        Build an order with only the required fields set.

        Args:
            recipient_name: Name printed on the shipping label.
            postal_or_zip_code: Recipient's postal or zip code.
            country_code: Two-letter ISO country code.
            preferred_shipping_method: Requested shipping speed.

        Returns:
            OrderCreate with every optional field left absent.
        """
        return cls(
            recipient_name=recipient_name,
            postal_or_zip_code=postal_or_zip_code,
            country_code=country_code,
            preferred_shipping_method=preferred_shipping_method,
        )


class OrderImageAdd(WireModel):
    """Request body for adding one image to an order."""

    sku: str = Field(description="Product SKU to print the image on")
    url: str = Field(description="Publicly reachable source image URL")
    copies: int = Field(ge=0)
    sizing: ImageResizingMethod
    price_to_user: Optional[float] = None
    md5_hash: Optional[str] = None
    attributes: Optional[ImageAttributes] = None


ImageAddList = TypeAdapter(list[OrderImageAdd])


# Inbound


class Country(Snapshot):
    """Country the vendor ships to."""

    name: str
    iso_code: str


class OrderImage(Snapshot):
    """Image attached to an order, as reported by the server."""

    id: int
    sku: str
    url: str
    status: OrderStatus
    copies: int
    # Opaque: response labels are not guaranteed to match ImageResizingMethod
    sizing: str
    price_to_user: Optional[float] = None
    price: float
    md5_hash: Optional[str] = None
    preview_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    attributes: Optional[ImageAttributes] = None
    error_message: Optional[str] = None


class Shipment(Snapshot):
    """One parcel of an order."""

    carrier: ShippingCarrier
    photo_ids: list[int]
    shipment_id: str
    tracking_number: Optional[str] = None
    tracking_url: Optional[str] = None
    is_tracked: bool
    earliest_estimated_arrival_date: Optional[AwareDatetime] = None
    latest_estimated_arrival_date: Optional[AwareDatetime] = None
    shipped_on: AwareDatetime


class ShippingInfo(Snapshot):
    """Shipping cost and shipments of an order."""

    price: float
    shipments: list[Shipment]


class Order(Snapshot):
    """Order as stored by the vendor."""

    id: int
    address1: Optional[str] = None
    address2: Optional[str] = None
    postal_or_zip_code: str
    country_code: str
    address_town_or_city: Optional[str] = None
    recipient_name: str
    state_or_county: Optional[str] = None
    status: OrderStatus
    payment: Payment
    payment_url: Optional[str] = None
    price: float
    shipping_info: ShippingInfo
    images: list[OrderImage]
    invoice_amount_net: Optional[float] = None
    invoice_tax: Optional[float] = None
    invoice_currency: Optional[str] = None
    merchant_order_id: Optional[str] = None
    preferred_shipping_method: ShippingMethod
    mobile_telephone: Optional[str] = None
    created: AwareDatetime
    last_updated: AwareDatetime
    can_cancel: bool
    can_hold: bool
    can_update_shipping: bool
    can_update_images: bool
    tag: Optional[str] = None
    packing_slip_url: Optional[str] = None
    error_message: Optional[str] = None


# Envelopes


class Envelope(BaseModel, Generic[T]):
    """Wrapper the API puts around every response body."""

    data: T


class ImageBatch(BaseModel):
    """Inner object of the batch image response."""

    items: list[OrderImage]
