# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Define the NativeDicomModel class, the root of a Native DICOM Model
document.
"""
from typing import Any, Optional
from xml.etree.ElementTree import Element, ElementTree, SubElement

from nativedicom.dataset import DicomDataSet
from nativedicom.valuerep import check_element_name


class NativeDicomModel:
    """The root of a Native DICOM Model document (DICOM PS3.19, Annex A).

    Attributes
    ----------
    dataset : DicomDataSet
        The top-level attributes of the document.
    """
    element_name = "NativeDicomModel"

    def __init__(self, dataset: DicomDataSet) -> None:
        if not isinstance(dataset, DicomDataSet):
            raise TypeError(
                "NativeDicomModel requires a DicomDataSet, not "
                f"{type(dataset).__name__}"
            )

        self._dataset = dataset

    @property
    def dataset(self) -> DicomDataSet:
        """Return the document's :class:`~nativedicom.dataset.DicomDataSet`.
        """
        return self._dataset

    @classmethod
    def from_xml(cls, element: Element) -> "NativeDicomModel":
        """Return a :class:`NativeDicomModel` from a ``NativeDicomModel``
        element.

        Raises
        ------
        ShapeMismatchError
            If `element` isn't a ``NativeDicomModel`` element.
        """
        check_element_name(element, cls.element_name)
        return cls(DicomDataSet.from_xml(element))

    def to_xml(self, parent: Optional[Element] = None) -> Element:
        """Return a new ``NativeDicomModel`` element holding the dataset.

        Parameters
        ----------
        parent : xml.etree.ElementTree.Element, optional
            If used then the new element is appended to `parent`.
        """
        if parent is None:
            node = Element(self.element_name)
        else:
            node = SubElement(parent, self.element_name)

        self._dataset.to_xml(node)
        return node

    def serialize(
        self, tree: ElementTree, parent: Optional[Element] = None
    ) -> None:
        """Write the document into `tree`.

        Parameters
        ----------
        tree : xml.etree.ElementTree.ElementTree
            The destination tree.
        parent : xml.etree.ElementTree.Element, optional
            The element of `tree` to append the ``NativeDicomModel`` element
            to. If not used then the new element becomes the root of `tree`.
        """
        node = self.to_xml(parent)
        if parent is None:
            tree._setroot(node)

    def to_tree(self) -> ElementTree:
        """Return a new :class:`~xml.etree.ElementTree.ElementTree` rooted at
        the ``NativeDicomModel`` element.
        """
        return ElementTree(self.to_xml())

    def __eq__(self, other: Any) -> Any:
        if isinstance(other, NativeDicomModel):
            return self._dataset == other._dataset

        return NotImplemented

    def __str__(self) -> str:
        return str(self._dataset)

    def __repr__(self) -> str:
        return f"<NativeDicomModel, {len(self._dataset)} attribute(s)>"
