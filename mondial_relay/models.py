"""Shipment data models for the Mondial Relay shipment-creation API."""

from dataclasses import dataclass, field
from enum import Enum


class DeliveryModeCode(str, Enum):
    """Carrier delivery mode codes."""

    HOM = "HOM"  # Home delivery
    HOC = "HOC"  # Home delivery, Spain
    LD1 = "LD1"  # Home delivery, standard shipments
    LDS = "LDS"  # Home delivery, heavy or bulky shipments
    LCC = "LCC"  # Merchant delivery
    DRI = "DRI"  # Colisdrive delivery
    PR = "24R"  # Point Relais
    PRXL = "24L"  # Point Relais XL
    PRXXL = "24X"  # Point Relais XXL
    LOCKER = "24C"  # Locker


PICKUP_POINT_MODES = frozenset({
    DeliveryModeCode.PR,
    DeliveryModeCode.PRXL,
    DeliveryModeCode.PRXXL,
    DeliveryModeCode.LOCKER,
})


class CollectionModeCode(str, Enum):
    """How the carrier collects the parcel from the sender."""

    CCC = "CCC"  # Merchant collection
    CDR = "CDR"  # Home collection, standard shipments
    CDS = "CDS"  # Home collection, heavy or bulky shipments
    REL = "REL"  # Point Relais collection


class OutputType(str, Enum):
    PDF_URL = "PdfUrl"
    QR_CODE = "QRCode"
    ZPL_CODE = "ZplCode"
    IPL_CODE = "IplCode"


class PaperFormat(str, Enum):
    A4 = "A4"
    A5 = "A5"
    LABEL_10X15 = "10*15"


ZPL_FORMAT = "Generic_ZPL_10x15_200dpi"
IPL_FORMAT = "Generic_IPL_10x15_204dpi"


@dataclass
class Address:
    """A sender or recipient address as the carrier expects it."""

    title: str = ""
    firstname: str = ""
    lastname: str = ""
    streetname: str = ""
    address_add2: str = ""
    country_code: str = ""
    post_code: str = ""
    city: str = ""
    address_add1: str = ""
    mobile_no: str = ""
    email: str = ""

    def __post_init__(self):
        self.country_code = (self.country_code or "").upper()


@dataclass
class Weight:
    value: float
    unit: str = "gr"

    def __post_init__(self):
        if self.value < 0:
            raise ValueError(f"Parcel weight cannot be negative: {self.value}")


@dataclass
class Parcel:
    content: str
    weight: Weight


@dataclass(frozen=True)
class PickupPointDelivery:
    """Delivery to a Point Relais or locker identified by ``location``."""

    mode: DeliveryModeCode = DeliveryModeCode.PR
    location: str = ""

    def __post_init__(self):
        if self.mode not in PICKUP_POINT_MODES:
            raise ValueError(f"{self.mode.value} is not a pickup-point delivery mode")


@dataclass(frozen=True)
class HomeDelivery:
    """Delivery to the recipient's address. Never carries a location."""

    mode: DeliveryModeCode = DeliveryModeCode.HOM

    def __post_init__(self):
        if self.mode in PICKUP_POINT_MODES:
            raise ValueError(f"{self.mode.value} is not a home delivery mode")

    @property
    def location(self) -> str:
        return ""


DeliveryMode = PickupPointDelivery | HomeDelivery


@dataclass(frozen=True)
class CollectionMode:
    mode: CollectionModeCode = CollectionModeCode.REL

    @property
    def location(self) -> str:
        return ""


@dataclass(frozen=True)
class OutputOptions:
    """Label output settings.

    The format is dictated by the output type; use the constructors
    (``pdf``, ``qr_code``, ``zpl``, ``ipl``) rather than picking one.
    """

    output_type: OutputType
    output_format: str | None = None

    def __post_init__(self):
        expected = {
            OutputType.QR_CODE: {None},
            OutputType.ZPL_CODE: {ZPL_FORMAT},
            OutputType.IPL_CODE: {IPL_FORMAT},
            OutputType.PDF_URL: {p.value for p in PaperFormat},
        }[self.output_type]
        if self.output_format not in expected:
            raise ValueError(
                f"Output format {self.output_format!r} is not valid "
                f"for {self.output_type.value}"
            )

    @classmethod
    def pdf(cls, paper: PaperFormat = PaperFormat.A4) -> "OutputOptions":
        return cls(OutputType.PDF_URL, PaperFormat(paper).value)

    @classmethod
    def qr_code(cls) -> "OutputOptions":
        return cls(OutputType.QR_CODE)

    @classmethod
    def zpl(cls) -> "OutputOptions":
        return cls(OutputType.ZPL_CODE, ZPL_FORMAT)

    @classmethod
    def ipl(cls) -> "OutputOptions":
        return cls(OutputType.IPL_CODE, IPL_FORMAT)


@dataclass
class Context:
    login: str
    password: str
    customer_id: str
    culture: str
    version_api: str = "1.0"


@dataclass
class Shipment:
    order_no: str
    delivery_mode: DeliveryMode
    sender: Address
    recipient: Address
    parcels: list[Parcel] = field(default_factory=list)
    collection_mode: CollectionMode = field(default_factory=CollectionMode)
    customer_no: str = ""
    parcel_count: int = 1
    delivery_instruction: str = ""


@dataclass
class ShipmentRequest:
    context: Context
    output_options: OutputOptions
    shipments: list[Shipment] = field(default_factory=list)


class StatusLevel(str, Enum):
    ERROR = "Error"
    WARNING = "Warning"


@dataclass
class CarrierStatus:
    """One Status entry of a carrier response."""

    code: str
    level: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.level == StatusLevel.ERROR.value


@dataclass
class ShipmentResult:
    """What the carrier hands back for a created shipment."""

    shipment_number: str
    shipment_label: str | None = None
    shipment_raw_content: str | None = None

    def as_dict(self) -> dict:
        """Fulfillment data keys for this shipment.

        The raw label is also written under ``shippement_raw_content``, the
        key existing fulfillments were stored with.
        """
        return {
            "shipment_number": self.shipment_number,
            "shipment_label": self.shipment_label,
            "shipment_raw_content": self.shipment_raw_content,
            "shippement_raw_content": self.shipment_raw_content,
        }


@dataclass
class Label:
    tracking_number: str
    label_url: str
    tracking_url: str = ""


@dataclass
class FulfillmentResult:
    """Fulfillment data to store, plus the printable labels."""

    data: dict = field(default_factory=dict)
    labels: list[Label] = field(default_factory=list)


@dataclass
class CancellationResult:
    cancelled: bool
    reason: str = ""
