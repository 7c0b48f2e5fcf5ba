# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Define the DicomAttribute class.

A DicomAttribute has a tag,
              a value representation (VR),
              an optional keyword and private creator,
              and a value: ``None`` or a list of value nodes of one kind.
"""

from typing import (
    Any, Callable, Dict, List, Optional, Sequence, Union, TYPE_CHECKING
)
from xml.etree.ElementTree import Element, SubElement

from nativedicom.errors import (
    AccessorContractError, EmptyValueError, HeterogeneousValueError,
    InvalidVRError, NotUniqueError, ShapeMismatchError
)
from nativedicom.tag import Tag, TagType, tag_in_exception, tag_to_string
from nativedicom.valuerep import (
    BulkData, InlineBinary, NameComponents, PersonName, Value, ValueKind,
    check_element_name, child_elements, local_name
)
from nativedicom.vr import VR as VR_, FLOAT_VR, INT_VR, is_valid_vr

if TYPE_CHECKING:  # pragma: no cover
    from nativedicom.sequence import Item


ValueNode = Union[BulkData, InlineBinary, Value, PersonName, "Item"]

# Kinds that may only appear once in an attribute
SINGLE_VALUE_KINDS = {ValueKind.BULK_DATA, ValueKind.INLINE_BINARY}


def _value_parsers() -> Dict[str, Callable[[Element], Any]]:
    """Return the ``from_xml`` parser for each value element name."""
    from nativedicom.sequence import Item

    return {
        ValueKind.BULK_DATA.value: BulkData.from_xml,
        ValueKind.INLINE_BINARY.value: InlineBinary.from_xml,
        ValueKind.VALUE.value: Value.from_xml,
        ValueKind.ITEM.value: Item.from_xml,
        ValueKind.PERSON_NAME.value: PersonName.from_xml,
    }


class DicomAttribute:
    """Contain and manipulate a Native DICOM Model ``DicomAttribute``.

    Attributes
    ----------
    tag : BaseTag
        The attribute's tag.
    VR : VR
        The attribute's Value Representation.
    keyword : str or None
        The attribute's keyword, e.g. ``'PatientName'``.
    private_creator : str or None
        The private creator of a private attribute.
    value : list or None
        ``None`` when the attribute has no value, otherwise a non-empty
        list of :class:`~nativedicom.valuerep.BulkData`,
        :class:`~nativedicom.valuerep.InlineBinary`,
        :class:`~nativedicom.valuerep.Value`,
        :class:`~nativedicom.sequence.Item` or
        :class:`~nativedicom.valuerep.PersonName`, all of the same kind.
    """
    descripWidth = 35
    maxValuesToDisplay = 16

    def __init__(
        self,
        tag: TagType,
        VR: str,
        keyword: Optional[str] = None,
        private_creator: Optional[str] = None,
        value: Optional[Sequence[ValueNode]] = None,
    ) -> None:
        """Create a new :class:`DicomAttribute`.

        Parameters
        ----------
        tag : int or str or 2-tuple
            The tag in any of the forms accepted by
            :func:`~nativedicom.tag.Tag`.
        VR : str
            The 2 character DICOM value representation.
        keyword : str, optional
            The attribute's keyword.
        private_creator : str, optional
            The private creator of a private attribute.
        value : list, optional
            The attribute's value nodes, all of the same kind, or ``None``
            (default) for no value.

        Raises
        ------
        InvalidVRError
            If `VR` isn't a known Value Representation.
        HeterogeneousValueError
            If the value nodes are not all of the same kind.
        EmptyValueError
            If `value` is an empty list; use ``None`` for no value.
        """
        self.tag = Tag(tag)
        if not is_valid_vr(VR):
            raise InvalidVRError(f"Invalid VR '{VR}' for tag {self.tag}")

        self.VR = VR_(VR)
        self.keyword = keyword
        self.private_creator = private_creator
        self.value = self._validate_value(value)

    def _validate_value(
        self, value: Optional[Sequence[ValueNode]]
    ) -> Optional[List[ValueNode]]:
        if value is None:
            return None

        value = list(value)
        if not value:
            raise EmptyValueError(
                f"Attribute {self.tag} has an empty value list; use None for "
                "an attribute without a value"
            )

        for node in value:
            if not isinstance(getattr(node, "kind", None), ValueKind):
                raise TypeError(
                    f"Attribute values must be value nodes, not "
                    f"{type(node).__name__}"
                )

        kinds = {node.kind for node in value}
        if len(kinds) != 1:
            names = ", ".join(sorted(str(kind) for kind in kinds))
            raise HeterogeneousValueError(
                f"Attribute {self.tag} mixes values of kinds: {names}"
            )

        return value

    @property
    def value_kind(self) -> Optional[ValueKind]:
        """Return the :class:`~nativedicom.valuerep.ValueKind` of the value
        or ``None`` if the attribute has no value.
        """
        if self.value is None:
            return None

        return self.value[0].kind

    @property
    def VM(self) -> int:
        """Return the number of value nodes held by the attribute."""
        return 0 if self.value is None else len(self.value)

    @property
    def is_private(self) -> bool:
        """Return ``True`` if the attribute's tag is private."""
        return self.tag.is_private

    @classmethod
    def from_xml(cls, element: Element) -> "DicomAttribute":
        """Return a :class:`DicomAttribute` from a ``DicomAttribute``
        element.

        Parameters
        ----------
        element : xml.etree.ElementTree.Element
            The ``DicomAttribute`` element.

        Returns
        -------
        DicomAttribute

        Raises
        ------
        ShapeMismatchError
            If the element isn't a ``DicomAttribute``, lacks a ``tag`` or
            ``vr`` or has children that aren't value elements.
        InvalidVRError
            If ``vr`` isn't a known Value Representation.
        HeterogeneousValueError
            If the children are not all of the same kind.
        """
        check_element_name(element, "DicomAttribute")

        tag = element.get("tag")
        if tag is None:
            raise ShapeMismatchError(
                "'DicomAttribute' is missing the 'tag' attribute"
            )
        try:
            tag_value = Tag(tag)
        except (ValueError, OverflowError) as exc:
            raise ShapeMismatchError(
                f"Invalid DicomAttribute tag '{tag}'"
            ) from exc

        vr = element.get("vr")
        if vr is None:
            raise ShapeMismatchError(
                f"'DicomAttribute' with tag '{tag}' is missing the 'vr' "
                "attribute"
            )
        if not is_valid_vr(vr):
            raise InvalidVRError(f"Invalid VR '{vr}' for tag '{tag}'")

        keyword = element.get("keyword")
        private_creator = element.get("privateCreator")

        value = None
        children = child_elements(element)
        if children:
            with tag_in_exception(tag_value):
                value = cls._parse_values(children)

        return cls(tag_value, vr, keyword, private_creator, value)

    @staticmethod
    def _parse_values(children: List[Element]) -> List[ValueNode]:
        names = {local_name(child) for child in children}
        if len(names) != 1:
            raise HeterogeneousValueError(
                f"Heterogeneous values: {', '.join(sorted(names))}"
            )

        name = names.pop()
        parsers = _value_parsers()
        if name not in parsers:
            raise ShapeMismatchError(f"Invalid value element '{name}'")

        if ValueKind(name) in SINGLE_VALUE_KINDS and len(children) > 1:
            raise NotUniqueError(
                f"'{name}' may occur at most once, found {len(children)}"
            )

        return [parsers[name](child) for child in children]

    def to_xml(self, parent: Element) -> Element:
        """Append a ``DicomAttribute`` element for `self` to `parent`.

        Returns
        -------
        xml.etree.ElementTree.Element
            The new element.
        """
        node = SubElement(parent, "DicomAttribute")
        node.set("tag", tag_to_string(self.tag))
        node.set("vr", self.VR.value)
        if self.keyword is not None:
            node.set("keyword", self.keyword)
        if self.private_creator is not None:
            node.set("privateCreator", self.private_creator)

        for value in self.value or []:
            value.to_xml(node)

        return node

    def _single(self, kind: ValueKind, accessor: str) -> Any:
        if self.value is None:
            raise AccessorContractError(
                f"{accessor}: attribute {self.tag} has no value"
            )
        if len(self.value) != 1:
            raise AccessorContractError(
                f"{accessor}: attribute {self.tag} has {len(self.value)} "
                "values, expected a single value"
            )

        node = self.value[0]
        if node.kind is not kind:
            raise AccessorContractError(
                f"{accessor}: attribute {self.tag} holds {node.kind}, "
                f"not {kind}"
            )

        return node

    def _all(self, kind: ValueKind, accessor: str) -> List[Any]:
        if self.value is None:
            raise AccessorContractError(
                f"{accessor}: attribute {self.tag} has no value"
            )

        wrong = [node.kind for node in self.value if node.kind is not kind]
        if wrong:
            raise AccessorContractError(
                f"{accessor}: attribute {self.tag} holds {wrong[0]}, "
                f"not {kind}"
            )

        return list(self.value)

    def get_value(self) -> Value:
        """Return the attribute's only :class:`~nativedicom.valuerep.Value`.

        Raises
        ------
        AccessorContractError
            If there is no value, more than one value or the value isn't a
            ``Value``.
        """
        return self._single(ValueKind.VALUE, "get_value")

    def get_values(self) -> List[Value]:
        """Return all the attribute's :class:`~nativedicom.valuerep.Value`.

        Raises
        ------
        AccessorContractError
            If there is no value or the values aren't ``Value``.
        """
        return self._all(ValueKind.VALUE, "get_values")

    def get_bulk_data(self) -> BulkData:
        """Return the attribute's only
        :class:`~nativedicom.valuerep.BulkData`.
        """
        return self._single(ValueKind.BULK_DATA, "get_bulk_data")

    def get_inline_binary(self) -> InlineBinary:
        """Return the attribute's only
        :class:`~nativedicom.valuerep.InlineBinary`.
        """
        return self._single(ValueKind.INLINE_BINARY, "get_inline_binary")

    def get_items(self) -> List["Item"]:
        """Return the attribute's sequence items."""
        return self._all(ValueKind.ITEM, "get_items")

    def get_person_name(self) -> PersonName:
        return self._single(ValueKind.PERSON_NAME, "get_person_name")

    def extract_value(self) -> Union[int, float, str]:
        """Return the attribute's single value converted by VR.

        * **OF**, **OD**, **FL**, **FD** and **DS** return :class:`float`
        * **OL**, **OV**, **SL**, **SS**, **SV**, **UL**, **US** and **UV**
          return :class:`int`
        * all other VRs return the text unchanged

        Raises
        ------
        AccessorContractError
            If the attribute doesn't hold a single ``Value``.
        ValueError
            If the text can't be converted to the VR's number type.
        """
        text = self.get_value().value
        if self.VR in FLOAT_VR:
            return float(text)

        if self.VR in INT_VR:
            return int(text)

        return text

    @property
    def repval(self) -> str:
        """Return a :class:`str` representation of the attribute's value."""
        kind = self.value_kind
        if kind is None:
            return ""

        if kind is ValueKind.VALUE:
            if self.VM > self.maxValuesToDisplay:
                return f"Array of {self.VM} elements"
            texts = [repr(v.value) for v in self.value]  # type: ignore
            return texts[0] if self.VM == 1 else f"[{', '.join(texts)}]"

        if kind is ValueKind.PERSON_NAME:
            names = [repr(str(pn)) for pn in self.value]  # type: ignore
            return names[0] if self.VM == 1 else f"[{', '.join(names)}]"

        if kind is ValueKind.ITEM:
            return f"{self.VM} item(s)"

        return repr(self.value[0])  # type: ignore

    def description(self) -> str:
        """Return the keyword of the attribute, or a placeholder."""
        if self.keyword:
            return self.keyword

        if self.tag.is_private:
            if self.private_creator:
                return f"[{self.private_creator}] Private tag data"
            return "Private tag data"

        return ""

    def __eq__(self, other: Any) -> Any:
        """Compare `self` and `other` for equality.

        Returns
        -------
        bool
            The result if `self` and `other` are the same class
        NotImplemented
            If `other` is not the same class as `self` then returning
            :class:`NotImplemented` delegates the result to
            ``superclass.__eq__(subclass)``.
        """
        # Faster result if same object
        if other is self:
            return True

        if isinstance(other, self.__class__):
            return (
                self.tag == other.tag
                and self.VR == other.VR
                and self.keyword == other.keyword
                and self.private_creator == other.private_creator
                and self.value == other.value
            )

        return NotImplemented

    def __ne__(self, other: Any) -> Any:
        """Compare `self` and `other` for inequality."""
        return not (self == other)

    def __str__(self) -> str:
        """Return :class:`str` representation of the element."""
        return "%s %-*s %s: %s" % (
            str(self.tag), self.descripWidth,
            self.description()[:self.descripWidth], self.VR.value, self.repval
        )

    def __repr__(self) -> str:
        """Return the representation of the element."""
        return str(self)


def person_name_attribute(
    tag: TagType,
    names: Sequence[Union[str, PersonName, NameComponents]],
    keyword: Optional[str] = None,
) -> DicomAttribute:
    """Return a **PN** :class:`DicomAttribute` holding `names`.

    Parameters
    ----------
    tag : int or str or 2-tuple
        The tag of the new attribute.
    names : list
        Each name as a DICOM PN string (``'Doe^John'``), a
        :class:`~nativedicom.valuerep.PersonName` or the alphabetic
        :class:`~nativedicom.valuerep.NameComponents`.
    keyword : str, optional
        The keyword of the new attribute.
    """
    value: List[ValueNode] = []
    for number, name in enumerate(names, start=1):
        if isinstance(name, PersonName):
            value.append(PersonName(
                number, name.alphabetic, name.ideographic, name.phonetic
            ))
        elif isinstance(name, NameComponents):
            value.append(PersonName(number, alphabetic=name))
        else:
            value.append(PersonName.from_dicom_string(number, name))

    return DicomAttribute(tag, "PN", keyword, value=value or None)


def values_attribute(
    tag: TagType,
    VR: str,
    values: Sequence[Any],
    keyword: Optional[str] = None,
) -> DicomAttribute:
    """Return a :class:`DicomAttribute` whose value is `values` written as
    ``Value`` nodes numbered from 1.

    Examples
    --------
    >>> elem = values_attribute(0x00280030, "DS", [0.5, 0.5])
    >>> [v.value for v in elem.get_values()]
    ['0.5', '0.5']
    """
    value: List[ValueNode] = [
        Value(number, str(v)) for number, v in enumerate(values, start=1)
    ]
    return DicomAttribute(tag, VR, keyword, value=value or None)
