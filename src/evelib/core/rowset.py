"""
Row-set decoding.

Upstream APIs return tabular data in several shapes: a JSON array, a single
JSON object when only one row exists, an object wrapped in {"rowset": ...}
or {"row": ...}, or an XML <rowset> of <row .../> elements whose columns are
attributes. normalize_rows() flattens all of these to one list, and
decode_rows() turns that list into typed records in document order.
"""

import typing
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any, Optional, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .enums import WireEnum
from .errors import DecodeError

RecordT = TypeVar("RecordT", bound=BaseModel)

_WRAPPER_KEYS = ("rowset", "row")


def as_list(value: Any) -> list[Any]:
    """Treat None and empty text as no items, and a lone item as one."""
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value
    return [value]


def normalize_rows(raw: Any) -> list[Any]:
    """
    Flatten any row-set shape into a list of rows.

    A single object and a one-element array produce the same result.

    Args:
        raw: Decoded JSON value or XML element

    Returns:
        List of row mappings (or XML <row> elements), in document order
    """
    if raw is None:
        return []

    if isinstance(raw, ET.Element):
        rowset = raw if raw.tag == "rowset" else raw.find(".//rowset")
        return [] if rowset is None else rowset.findall("row")

    if isinstance(raw, Mapping):
        for key in _WRAPPER_KEYS:
            if key in raw:
                return normalize_rows(raw[key])
        return [raw]

    if isinstance(raw, (list, tuple)):
        rows: list[Any] = []
        for item in raw:
            if isinstance(item, Mapping) and any(key in item for key in _WRAPPER_KEYS):
                rows.extend(normalize_rows(item))
            else:
                rows.append(item)
        return rows

    return [raw]


def _wire_enum_type(annotation: Any) -> Optional[type[WireEnum]]:
    """Return the WireEnum class behind an annotation (including Optional)."""
    if isinstance(annotation, type) and issubclass(annotation, WireEnum):
        return annotation
    for arg in typing.get_args(annotation):
        found = _wire_enum_type(arg)
        if found is not None:
            return found
    return None


def decode_error_from_validation(
    error: ValidationError,
    record_type: type[BaseModel],
    row_index: Optional[int] = None,
) -> DecodeError:
    """Convert a pydantic ValidationError into a DecodeError naming the field."""
    details = error.errors()
    first = details[0] if details else {}
    loc = first.get("loc", ())
    field = ".".join(str(part) for part in loc) or None
    reason = first.get("msg", str(error))

    message = f"Invalid {record_type.__name__}"
    if field:
        message += f" field '{field}'"
    if row_index is not None:
        message += f" at row {row_index}"
    message += f": {reason}"
    return DecodeError(message, field=field, row_index=row_index)


def decode_row(row: Any, record_type: type[RecordT], row_index: int = 0) -> RecordT:
    """
    Decode one row into a record.

    Checks every required field is present, maps enumerated fields through
    WireEnum.from_wire(), then validates the result against the record type.

    Raises:
        DecodeError: If a required field is missing or a value does not fit
        UnknownEnumToken: If an enumerated field carries an unknown token
    """
    if isinstance(row, ET.Element):
        row = dict(row.attrib)
    if not isinstance(row, Mapping):
        raise DecodeError(
            f"Row {row_index} is {type(row).__name__}, expected an object",
            row_index=row_index,
        )

    values = dict(row)
    for name, field in record_type.model_fields.items():
        wire_name = field.alias or name
        if wire_name not in values and name in values:
            wire_name = name

        if wire_name not in values:
            if field.is_required():
                raise DecodeError(
                    f"Row {row_index} is missing required field '{wire_name}'",
                    field=wire_name,
                    row_index=row_index,
                )
            continue

        enum_type = _wire_enum_type(field.annotation)
        if enum_type is not None and values[wire_name] is not None:
            values[wire_name] = enum_type.from_wire(
                values[wire_name], field=wire_name, row_index=row_index
            )

    try:
        return record_type.model_validate(values)
    except ValidationError as e:
        raise decode_error_from_validation(e, record_type, row_index=row_index) from e


def decode_rows(raw: Any, record_type: type[RecordT]) -> list[RecordT]:
    """
    Decode a row-set payload into typed records.

    Args:
        raw: Array, single object, wrapped object or XML rowset
        record_type: pydantic model describing one row

    Returns:
        One record per row, in document order. Empty input gives [].
    """
    return [
        decode_row(row, record_type, index) for index, row in enumerate(normalize_rows(raw))
    ]


# =============================================================================
# XML
# =============================================================================


def parse_xml(content: Union[str, bytes]) -> ET.Element:
    """Parse an XML document, raising DecodeError on malformed input."""
    try:
        return ET.fromstring(content)
    except ET.ParseError as e:
        raise DecodeError(f"Malformed XML document: {e}") from e


def find_rowset(element: ET.Element, name: Optional[str] = None) -> ET.Element:
    """
    Locate a <rowset> element, optionally by its name attribute.

    Raises:
        DecodeError: If no matching rowset exists
    """
    for candidate in element.iter("rowset"):
        if name is None or candidate.get("name") == name:
            return candidate
    label = f"rowset '{name}'" if name else "rowset"
    raise DecodeError(f"Document has no {label}", field=name)


def decode_xml_rows(
    source: Union[str, bytes, ET.Element],
    record_type: type[RecordT],
    rowset_name: Optional[str] = None,
) -> list[RecordT]:
    """
    Decode the rows of an XML <rowset> into typed records.

    Columns are read from each <row> element's attributes.
    """
    element = source if isinstance(source, ET.Element) else parse_xml(source)
    rowset = find_rowset(element, rowset_name)
    return decode_rows([dict(row.attrib) for row in rowset.findall("row")], record_type)


def xml_to_dict(element: ET.Element) -> Any:
    """
    Convert an element tree into plain dicts, lists and strings.

    Attributes and child elements become keys; repeated children become a
    list. A leaf element without attributes becomes its stripped text.
    """
    children = list(element)
    text = (element.text or "").strip()
    if not children and not element.attrib:
        return text

    result: dict[str, Any] = dict(element.attrib)
    for child in children:
        value = xml_to_dict(child)
        if child.tag in result:
            existing = result[child.tag]
            if not isinstance(existing, list):
                result[child.tag] = existing = [existing]
            existing.append(value)
        else:
            result[child.tag] = value

    if text and not children:
        result["text"] = text
    return result
