"""XML encoding of shipment requests and decoding of carrier responses."""

from xml.etree import ElementTree as ET

from mondial_relay.errors import MalformedResponseError
from mondial_relay.models import (
    Address,
    CarrierStatus,
    Parcel,
    Shipment,
    ShipmentRequest,
    ShipmentResult,
)

REQUEST_NAMESPACE = "http://www.example.org/Request"


def _number(value: float) -> str:
    """Render 1500.0 as "1500" but keep real fractions."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _add_text(parent: ET.Element, tag: str, value) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = "" if value is None else str(value)
    return element


def _add_address(parent: ET.Element, address: Address) -> None:
    element = ET.SubElement(parent, "Address")
    _add_text(element, "Title", address.title)
    _add_text(element, "Firstname", address.firstname)
    _add_text(element, "Lastname", address.lastname)
    _add_text(element, "Streetname", address.streetname)
    _add_text(element, "AddressAdd2", address.address_add2)
    _add_text(element, "CountryCode", (address.country_code or "").upper())
    _add_text(element, "PostCode", address.post_code)
    _add_text(element, "City", address.city)
    _add_text(element, "AddressAdd1", address.address_add1)
    _add_text(element, "MobileNo", address.mobile_no)
    _add_text(element, "Email", address.email)


def _add_parcel(parent: ET.Element, parcel: Parcel) -> None:
    element = ET.SubElement(parent, "Parcel")
    _add_text(element, "Content", parcel.content)
    ET.SubElement(
        element,
        "Weight",
        Value=_number(parcel.weight.value),
        Unit=parcel.weight.unit,
    )


def _add_shipment(parent: ET.Element, shipment: Shipment) -> None:
    element = ET.SubElement(parent, "Shipment")
    _add_text(element, "OrderNo", shipment.order_no)
    _add_text(element, "CustomerNo", shipment.customer_no)
    _add_text(element, "ParcelCount", shipment.parcel_count)
    ET.SubElement(
        element,
        "DeliveryMode",
        Mode=shipment.delivery_mode.mode.value,
        Location=shipment.delivery_mode.location,
    )
    ET.SubElement(
        element,
        "CollectionMode",
        Mode=shipment.collection_mode.mode.value,
        Location=shipment.collection_mode.location,
    )
    parcels = ET.SubElement(element, "Parcels")
    for parcel in shipment.parcels:
        _add_parcel(parcels, parcel)
    _add_text(element, "DeliveryInstruction", shipment.delivery_instruction)
    _add_address(ET.SubElement(element, "Sender"), shipment.sender)
    _add_address(ET.SubElement(element, "Recipient"), shipment.recipient)


def encode_request(request: ShipmentRequest) -> bytes:
    """Render a shipment creation request as the carrier's XML document.

    Every field is always emitted, empty when the value is missing.
    Values are escaped by ElementTree, so free text such as
    "Dupont & Fils" stays well-formed.
    """
    root = ET.Element("ShipmentCreationRequest", xmlns=REQUEST_NAMESPACE)

    context = ET.SubElement(root, "Context")
    _add_text(context, "Login", request.context.login)
    _add_text(context, "Password", request.context.password)
    _add_text(context, "CustomerId", request.context.customer_id)
    _add_text(context, "Culture", request.context.culture)
    _add_text(context, "VersionAPI", request.context.version_api)

    output = ET.SubElement(root, "OutputOptions")
    _add_text(output, "OutputFormat", request.output_options.output_format)
    _add_text(output, "OutputType", request.output_options.output_type.value)

    shipments = ET.SubElement(root, "ShipmentsList")
    for shipment in request.shipments:
        _add_shipment(shipments, shipment)

    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element | None, name: str) -> ET.Element | None:
    """First child of ``element`` with local name ``name``, any namespace."""
    if element is None:
        return None
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _children(element: ET.Element | None, name: str) -> list[ET.Element]:
    if element is None:
        return []
    return [child for child in element if _local_name(child.tag) == name]


def _inner_xml(element: ET.Element | None) -> str | None:
    """Text of ``element`` including any nested markup."""
    if element is None:
        return None
    if len(element) == 0:
        return element.text
    parts = [element.text or ""]
    parts.extend(ET.tostring(child, encoding="unicode") for child in element)
    return "".join(parts)


def parse_response(body: bytes | str) -> ET.Element:
    """Parse a ShipmentCreationResponse document and return its root."""
    try:
        root = ET.fromstring(body)
    except ET.ParseError as exc:
        raise MalformedResponseError(f"Response is not valid XML: {exc}") from exc

    if _local_name(root.tag) != "ShipmentCreationResponse":
        raise MalformedResponseError(
            f"Unexpected response root element: {_local_name(root.tag)}"
        )
    return root


def read_statuses(root: ET.Element) -> list[CarrierStatus]:
    """Status entries of a response, in document order. May be empty."""
    return [
        CarrierStatus(
            code=status.get("Code", ""),
            level=status.get("Level", ""),
            message=status.get("Message", ""),
        )
        for status in _children(_child(root, "StatusList"), "Status")
    ]


def read_result(root: ET.Element) -> ShipmentResult:
    """Extract the first shipment's number and label from a response.

    Raises:
        MalformedResponseError: The response carries no shipment, meaning
            the carrier did not create one.
    """
    shipments = _child(root, "ShipmentsList")
    if shipments is None:
        raise MalformedResponseError("Failed to create shipment: response has no ShipmentsList")

    shipment = _child(shipments, "Shipment")
    if shipment is None:
        raise MalformedResponseError("Failed to create shipment: ShipmentsList is empty")

    shipment_number = shipment.get("ShipmentNumber")
    if not shipment_number:
        raise MalformedResponseError("Failed to create shipment: no ShipmentNumber")

    label = _child(_child(shipment, "LabelList"), "Label")
    output = _child(label, "Output")
    raw_content = _child(label, "RawContent")

    return ShipmentResult(
        shipment_number=shipment_number,
        shipment_label=output.text if output is not None else None,
        shipment_raw_content=_inner_xml(raw_content),
    )
