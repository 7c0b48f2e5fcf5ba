# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Define the Item class, one item of an attribute with VR **SQ**.

Each item owns a nested :class:`~nativedicom.dataset.DicomDataSet`, which
is what allows sequences to nest to any depth.
"""
from typing import Any, Iterable, Optional
from xml.etree.ElementTree import Element, SubElement

from nativedicom.dataset import DicomDataSet
from nativedicom.valuerep import (
    ValueKind, check_element_name, get_number, validate_number
)


class Item:
    """A sequence item.

    Attributes
    ----------
    number : int
        The 1-based position of the item within the sequence.
    dataset : DicomDataSet
        The attributes of the item.
    """
    kind = ValueKind.ITEM

    def __init__(
        self,
        number: int,
        dataset: Optional[Iterable[Any]] = None
    ) -> None:
        """Create a new :class:`Item`.

        Parameters
        ----------
        number : int
            The 1-based position of the item.
        dataset : DicomDataSet or iterable of DicomAttribute, optional
            The item's attributes. If not used then the item is empty.
        """
        if not isinstance(dataset, DicomDataSet):
            dataset = DicomDataSet(dataset or [])

        self.number = validate_number(number)
        self.dataset = dataset

    @classmethod
    def from_xml(cls, element: Element) -> "Item":
        """Return an :class:`Item` from an ``Item`` element, whose children
        are the item's ``DicomAttribute`` elements.
        """
        check_element_name(element, cls.kind.value)
        number = get_number(element)
        return cls(number, DicomDataSet.from_xml(element))

    def to_xml(self, parent: Element) -> Element:
        node = SubElement(parent, self.kind.value)
        node.set("number", str(self.number))
        self.dataset.to_xml(node)
        return node

    def __eq__(self, other: Any) -> Any:
        if isinstance(other, Item):
            return (
                self.number == other.number and self.dataset == other.dataset
            )

        return NotImplemented

    def __repr__(self) -> str:
        return f"<Item {self.number}, {len(self.dataset)} attribute(s)>"
