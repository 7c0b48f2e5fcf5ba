# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Special classes for the values held by a Native DICOM Model
``DicomAttribute``.

A ``DicomAttribute`` element holds zero or more children that are all of
one kind: ``BulkData``, ``InlineBinary``, ``Value``, ``Item`` or
``PersonName``. Every kind has a class with a ``from_xml()`` classmethod
and a ``to_xml()`` method; :class:`~nativedicom.sequence.Item` lives in
:mod:`nativedicom.sequence` as it owns a nested dataset.
"""

import base64
from enum import Enum, unique
from typing import Optional, List, Any, Union
from xml.etree.ElementTree import Element, SubElement

from nativedicom.errors import (
    ShapeMismatchError, MutualExclusionError, EmptyValueError, NotUniqueError
)


@unique
class ValueKind(str, Enum):
    """The kinds of value an attribute can hold, by XML element name."""
    BULK_DATA = "BulkData"
    INLINE_BINARY = "InlineBinary"
    VALUE = "Value"
    ITEM = "Item"
    PERSON_NAME = "PersonName"

    def __str__(self) -> str:
        return str.__str__(self)


def local_name(element: Element) -> str:
    """Return the tag name of `element` without any ``{namespace}``."""
    tag = element.tag
    if not isinstance(tag, str):
        # comments and processing instructions
        return ""
    return tag.rsplit("}", 1)[-1]


def child_elements(element: Element) -> List[Element]:
    """Return the direct child elements of `element` in document order."""
    return [child for child in element if isinstance(child.tag, str)]


def text_content(element: Element) -> str:
    """Return all the text inside `element`, like DOM ``textContent``."""
    return "".join(element.itertext())


def check_element_name(element: Element, name: str) -> None:
    """Raise :class:`~nativedicom.errors.ShapeMismatchError` unless
    `element` is named `name`.
    """
    if local_name(element) != name:
        raise ShapeMismatchError(
            f"Expected a '{name}' element, got '{local_name(element)}'"
        )


def get_number(element: Element) -> int:
    """Return the 1-based ordinal in the ``number`` attribute of `element`.

    Raises
    ------
    ShapeMismatchError
        If the attribute is missing or isn't a positive integer.
    """
    number = element.get("number")
    if number is None:
        raise ShapeMismatchError(
            f"'{local_name(element)}' is missing the 'number' attribute"
        )
    try:
        value = int(number)
    except ValueError:
        raise ShapeMismatchError(
            f"'{local_name(element)}' has an invalid number '{number}'"
        )

    return validate_number(value)


def validate_number(number: Any) -> int:
    """Return `number` if it's usable as a value or item ordinal."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise ShapeMismatchError(
            f"Value numbers must be integers, not {type(number).__name__}"
        )
    if number < 1:
        raise ShapeMismatchError(
            f"Value numbers start at 1, got {number}"
        )

    return number


def find_unique_child(children: List[Element], name: str) -> Optional[Element]:
    """Return the only element of `children` named `name` or ``None``.

    Raises
    ------
    NotUniqueError
        If more than one of `children` is named `name`.
    """
    found = [elem for elem in children if local_name(elem) == name]
    if len(found) > 1:
        raise NotUniqueError(
            f"'{name}' may occur at most once, found {len(found)}"
        )

    return found[0] if found else None


class BulkData:
    """A reference to a value stored outside the document.

    Exactly one of `uuid` and `uri` is set.
    """
    kind = ValueKind.BULK_DATA

    def __init__(
        self, uuid: Optional[str] = None, uri: Optional[str] = None
    ) -> None:
        # An empty attribute is the same as a missing one
        uuid = uuid or None
        uri = uri or None
        if (uuid is None) == (uri is None):
            raise MutualExclusionError(
                "BulkData must contain a uuid or a uri, but not both: "
                f"uuid={uuid!r}, uri={uri!r}"
            )

        self.uuid = uuid
        self.uri = uri

    @classmethod
    def from_xml(cls, element: Element) -> "BulkData":
        """Return a :class:`BulkData` from a ``BulkData`` element."""
        check_element_name(element, cls.kind.value)
        return cls(element.get("uuid"), element.get("uri"))

    def to_xml(self, parent: Element) -> Element:
        """Append a ``BulkData`` element for `self` to `parent`."""
        node = SubElement(parent, self.kind.value)
        if self.uuid is not None:
            node.set("uuid", self.uuid)
        if self.uri is not None:
            node.set("uri", self.uri)

        return node

    def __eq__(self, other: Any) -> Any:
        if isinstance(other, BulkData):
            return self.uuid == other.uuid and self.uri == other.uri

        return NotImplemented

    def __repr__(self) -> str:
        if self.uri is not None:
            return f"BulkData(uri={self.uri!r})"

        return f"BulkData(uuid={self.uuid!r})"


class InlineBinary:
    """A binary value held in the document as base64 encoded text."""
    kind = ValueKind.INLINE_BINARY

    def __init__(self, value: str) -> None:
        if not value:
            raise EmptyValueError("InlineBinary must not be empty")

        self.value = value

    @classmethod
    def from_bytes(cls, data: bytes) -> "InlineBinary":
        """Return an :class:`InlineBinary` holding the base64 encoding of
        `data`.
        """
        return cls(base64.b64encode(data).decode("ascii"))

    def decoded(self) -> bytes:
        """Return the decoded binary value."""
        return base64.b64decode(self.value)

    @classmethod
    def from_xml(cls, element: Element) -> "InlineBinary":
        check_element_name(element, cls.kind.value)
        return cls(text_content(element))

    def to_xml(self, parent: Element) -> Element:
        node = SubElement(parent, self.kind.value)
        node.text = self.value
        return node

    def __eq__(self, other: Any) -> Any:
        if isinstance(other, InlineBinary):
            return self.value == other.value

        return NotImplemented

    def __repr__(self) -> str:
        if len(self.value) > 32:
            return f"InlineBinary({len(self.value)} characters)"

        return f"InlineBinary({self.value!r})"


class Value:
    """One value of a multi-valued attribute, as text.

    Attributes
    ----------
    number : int
        The 1-based position of the value within the attribute.
    value : str
        The text of the value, which may be empty.
    """
    kind = ValueKind.VALUE

    def __init__(self, number: int, value: str) -> None:
        if value is None:
            raise EmptyValueError(f"Value {number} has no content")

        self.number = validate_number(number)
        self.value = value

    @classmethod
    def from_xml(cls, element: Element) -> "Value":
        check_element_name(element, cls.kind.value)
        return cls(get_number(element), text_content(element))

    def to_xml(self, parent: Element) -> Element:
        node = SubElement(parent, self.kind.value)
        node.set("number", str(self.number))
        node.text = self.value
        return node

    def __eq__(self, other: Any) -> Any:
        if isinstance(other, Value):
            return self.number == other.number and self.value == other.value

        return NotImplemented

    def __repr__(self) -> str:
        return f"Value({self.number}, {self.value!r})"


class NameComponents:
    """One component group (alphabetic, ideographic or phonetic) of a
    person name.

    Each of the five components is optional and ``None`` when absent.
    """
    # (attribute name, XML element name) in the order they are written
    FIELDS = (
        ("family_name", "FamilyName"),
        ("given_name", "GivenName"),
        ("middle_name", "MiddleName"),
        ("name_prefix", "NamePrefix"),
        ("name_suffix", "NameSuffix"),
    )

    def __init__(
        self,
        family_name: Optional[str] = None,
        given_name: Optional[str] = None,
        middle_name: Optional[str] = None,
        name_prefix: Optional[str] = None,
        name_suffix: Optional[str] = None,
    ) -> None:
        self.family_name = family_name
        self.given_name = given_name
        self.middle_name = middle_name
        self.name_prefix = name_prefix
        self.name_suffix = name_suffix

    @classmethod
    def from_dicom_string(cls, value: str) -> "NameComponents":
        """Return a :class:`NameComponents` from a DICOM component group,
        e.g. ``'Adams^John Robert Quincy^^Rev.^B.A. M.Div.'``.

        Empty components are absent.
        """
        parts = value.split("^")
        if len(parts) > len(cls.FIELDS):
            raise ValueError(
                f"A person name component group has at most "
                f"{len(cls.FIELDS)} components: '{value}'"
            )

        return cls(*[part or None for part in parts])

    @classmethod
    def from_xml(cls, element: Element) -> "NameComponents":
        """Return a :class:`NameComponents` from an ``Alphabetic``,
        ``Ideographic`` or ``Phonetic`` element.
        """
        children = child_elements(element)
        kwargs = {}
        for attr, name in cls.FIELDS:
            node = find_unique_child(children, name)
            kwargs[attr] = None if node is None else text_content(node)

        return cls(**kwargs)

    def to_xml(self, parent: Element, name: str) -> Element:
        """Append a component group element `name` to `parent`."""
        node = SubElement(parent, name)
        for attr, tag in self.FIELDS:
            value = getattr(self, attr)
            if value is not None:
                SubElement(node, tag).text = value

        return node

    def __str__(self) -> str:
        """Return the components as a DICOM ``^`` delimited group."""
        parts = [getattr(self, attr) or "" for attr, _ in self.FIELDS]
        return "^".join(parts).rstrip("^")

    def __eq__(self, other: Any) -> Any:
        if isinstance(other, NameComponents):
            return all(
                getattr(self, attr) == getattr(other, attr)
                for attr, _ in self.FIELDS
            )

        return NotImplemented

    def __repr__(self) -> str:
        args = ", ".join(
            f"{attr}={getattr(self, attr)!r}"
            for attr, _ in self.FIELDS
            if getattr(self, attr) is not None
        )
        return f"NameComponents({args})"


class PersonName:
    """A value of an attribute with VR **PN**.

    Attributes
    ----------
    number : int
        The 1-based position of the name within the attribute.
    alphabetic, ideographic, phonetic : NameComponents or None
        The three component groups, each optional.
    """
    kind = ValueKind.PERSON_NAME

    GROUPS = (
        ("alphabetic", "Alphabetic"),
        ("ideographic", "Ideographic"),
        ("phonetic", "Phonetic"),
    )

    def __init__(
        self,
        number: int,
        alphabetic: Optional[NameComponents] = None,
        ideographic: Optional[NameComponents] = None,
        phonetic: Optional[NameComponents] = None,
    ) -> None:
        self.number = validate_number(number)
        self.alphabetic = alphabetic
        self.ideographic = ideographic
        self.phonetic = phonetic

    @classmethod
    def from_dicom_string(
        cls, number: int, value: Union[str, bytes]
    ) -> "PersonName":
        """Return a :class:`PersonName` from a DICOM PN string such as
        ``'Yamada^Tarou=山田^太郎=やまだ^たろう'``.
        """
        if isinstance(value, bytes):
            value = value.decode("utf-8")

        groups = value.split("=")
        if len(groups) > len(cls.GROUPS):
            raise ValueError(
                f"A person name has at most {len(cls.GROUPS)} component "
                f"groups: '{value}'"
            )

        components = [
            NameComponents.from_dicom_string(group) if group else None
            for group in groups
        ]
        return cls(number, *components)

    @classmethod
    def from_xml(cls, element: Element) -> "PersonName":
        check_element_name(element, cls.kind.value)
        number = get_number(element)

        children = child_elements(element)
        kwargs = {}
        for attr, name in cls.GROUPS:
            node = find_unique_child(children, name)
            kwargs[attr] = None if node is None else NameComponents.from_xml(
                node
            )

        return cls(number, **kwargs)

    def to_xml(self, parent: Element) -> Element:
        node = SubElement(parent, self.kind.value)
        node.set("number", str(self.number))
        for attr, name in self.GROUPS:
            components = getattr(self, attr)
            if components is not None:
                components.to_xml(node, name)

        return node

    def __str__(self) -> str:
        """Return the name in the ``=`` delimited DICOM PN form."""
        groups = [
            "" if getattr(self, attr) is None else str(getattr(self, attr))
            for attr, _ in self.GROUPS
        ]
        return "=".join(groups).rstrip("=")

    def __eq__(self, other: Any) -> Any:
        if isinstance(other, PersonName):
            return self.number == other.number and all(
                getattr(self, attr) == getattr(other, attr)
                for attr, _ in self.GROUPS
            )

        return NotImplemented

    def __repr__(self) -> str:
        return f"PersonName({self.number}, {str(self)!r})"
