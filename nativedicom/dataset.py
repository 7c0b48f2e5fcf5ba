# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Define the DicomDataSet class.

A DicomDataSet is an ordered collection of
:class:`~nativedicom.dataelem.DicomAttribute` with unique tags. It is both
the body of a ``NativeDicomModel`` document and the content of every
sequence ``Item``.
"""
from typing import (
    Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple
)
from xml.etree.ElementTree import Element

from nativedicom.dataelem import DicomAttribute
from nativedicom.errors import DuplicateTagError
from nativedicom.tag import BaseTag, Tag, TagType, tag_in_exception
from nativedicom.valuerep import ValueKind, child_elements


class DicomDataSet:
    """An ordered, tag-unique collection of
    :class:`~nativedicom.dataelem.DicomAttribute`.

    The attributes keep the order they were given in, which for a parsed
    dataset is the document order, and are written back in that order.
    Lookup by tag uses a mapping built once at construction.

    Examples
    --------
    >>> from nativedicom.dataelem import values_attribute
    >>> ds = DicomDataSet([
    ...     values_attribute(0x00100020, 'LO', ['12345'], 'PatientID'),
    ... ])
    >>> ds[0x00100020].extract_value()
    '12345'
    >>> ds.get_attribute_by_tag('00100010') is None
    True
    """
    indent_chars = "   "

    def __init__(self, attributes: Iterable[DicomAttribute] = ()) -> None:
        """Create a new :class:`DicomDataSet`.

        Parameters
        ----------
        attributes : iterable of DicomAttribute, optional
            The attributes of the dataset, in order.

        Raises
        ------
        DuplicateTagError
            If two of the attributes have the same tag.
        """
        self._attributes: Tuple[DicomAttribute, ...] = tuple(attributes)
        self._dict: Dict[BaseTag, DicomAttribute] = {}
        for attribute in self._attributes:
            if not isinstance(attribute, DicomAttribute):
                raise TypeError(
                    "Dataset contents must be DicomAttribute instances, not "
                    f"{type(attribute).__name__}"
                )
            if attribute.tag in self._dict:
                raise DuplicateTagError(f"Duplicate tag {attribute.tag}")
            self._dict[attribute.tag] = attribute

    @property
    def attributes(self) -> Tuple[DicomAttribute, ...]:
        """Return the attributes in their stored order."""
        return self._attributes

    @classmethod
    def from_xml(cls, element: Element) -> "DicomDataSet":
        """Return a :class:`DicomDataSet` from the ``DicomAttribute``
        children of `element`.

        Parameters
        ----------
        element : xml.etree.ElementTree.Element
            A ``NativeDicomModel`` or ``Item`` element.

        Raises
        ------
        DuplicateTagError
            If two of the children have the same tag.
        """
        attributes = [
            DicomAttribute.from_xml(child) for child in child_elements(element)
        ]
        return cls(attributes)

    def to_xml(self, parent: Element) -> None:
        """Append a ``DicomAttribute`` element to `parent` for each
        attribute, in order.
        """
        for attribute in self._attributes:
            attribute.to_xml(parent)

    def get_attribute_by_tag(self, tag: TagType) -> Optional[DicomAttribute]:
        """Return the attribute with tag `tag` or ``None`` if there is none.

        Parameters
        ----------
        tag : int or str or 2-tuple
            The tag in any form accepted by :func:`~nativedicom.tag.Tag`.
        """
        return self._dict.get(Tag(tag))

    def get(
        self, tag: TagType, default: Optional[Any] = None
    ) -> Any:
        """Return the attribute with tag `tag` or `default`."""
        attribute = self.get_attribute_by_tag(tag)
        return default if attribute is None else attribute

    def __getitem__(self, tag: TagType) -> DicomAttribute:
        """Return the attribute with tag `tag`.

        Raises
        ------
        KeyError
            If there is no attribute with tag `tag`.
        """
        attribute = self.get_attribute_by_tag(tag)
        if attribute is None:
            raise KeyError(Tag(tag))

        return attribute

    def __contains__(self, tag: Any) -> bool:
        """Return ``True`` if `tag` is the tag of one of the attributes."""
        try:
            return Tag(tag) in self._dict
        except (ValueError, OverflowError):
            return False

    def __iter__(self) -> Iterator[DicomAttribute]:
        """Iterate through the top-level attributes in stored order."""
        yield from self._attributes

    def __len__(self) -> int:
        return len(self._attributes)

    def keys(self) -> List[BaseTag]:
        """Return the tags of the attributes in stored order."""
        return [attribute.tag for attribute in self._attributes]

    def __eq__(self, other: Any) -> Any:
        """Compare `self` and `other` for equality.

        Two datasets are equal if they hold equal attributes in the same
        order.
        """
        if other is self:
            return True

        if isinstance(other, DicomDataSet):
            return self._attributes == other._attributes

        return NotImplemented

    def __ne__(self, other: Any) -> Any:
        """Compare `self` and `other` for inequality."""
        return not self == other

    def iterall(self) -> Iterator[DicomAttribute]:
        """Iterate through the :class:`DicomDataSet`, yielding all the
        attributes.

        Unlike ``DicomDataSet.__iter__()``, this *does* recurse into
        sequence items, and so yields all attributes as if the document
        were "flattened".

        Yields
        ------
        dataelem.DicomAttribute
        """
        for attribute in self:
            yield attribute
            if attribute.value_kind is ValueKind.ITEM:
                for item in attribute.get_items():
                    yield from item.dataset.iterall()

    def walk(
        self,
        callback: Callable[["DicomDataSet", DicomAttribute], None],
        recursive: bool = True
    ) -> None:
        """Iterate through the attributes and run `callback` on each.

        Visit all attributes in the :class:`DicomDataSet`, possibly
        recursing into sequence items. The `callback` function is called
        for each :class:`~nativedicom.dataelem.DicomAttribute` (including
        those holding items), in stored order.

        Parameters
        ----------
        callback
            A callable function that takes two arguments:

            * a :class:`DicomDataSet`
            * a :class:`~nativedicom.dataelem.DicomAttribute` belonging
              to that :class:`DicomDataSet`

        recursive : bool, optional
            Flag to indicate whether to recurse into sequences (default
            ``True``).
        """
        for attribute in self:
            with tag_in_exception(attribute.tag):
                callback(self, attribute)
                if recursive and attribute.value_kind is ValueKind.ITEM:
                    for item in attribute.get_items():
                        item.dataset.walk(callback)

    def without_private_tags(self) -> "DicomDataSet":
        """Return a copy of the dataset without any private attributes,
        including those inside sequence items.
        """
        from nativedicom.sequence import Item

        attributes = []
        for attribute in self:
            if attribute.is_private:
                continue

            if attribute.value_kind is ValueKind.ITEM:
                items = [
                    Item(item.number, item.dataset.without_private_tags())
                    for item in attribute.get_items()
                ]
                attribute = DicomAttribute(
                    attribute.tag,
                    attribute.VR,
                    attribute.keyword,
                    attribute.private_creator,
                    items
                )
            attributes.append(attribute)

        return self.__class__(attributes)

    def _pretty_str(
        self, indent: int = 0, top_level_only: bool = False
    ) -> str:
        """Return a string of the attributes in the dataset, with indented
        levels.

        This private method is called by the ``__str__()`` method and by
        ``top()``, therefore the `top_level_only` flag. This function
        recurses, with increasing indentation levels.
        """
        strings = []
        indent_str = self.indent_chars * indent
        nextindent_str = self.indent_chars * (indent + 1)

        for attribute in self:
            if attribute.value_kind is ValueKind.ITEM:
                strings.append(
                    f"{indent_str}{attribute.tag}  "
                    f"{attribute.description()}   "
                    f"{attribute.VM} item(s) ---- "
                )
                if not top_level_only:
                    for item in attribute.get_items():
                        strings.append(item.dataset._pretty_str(indent + 1))
                        strings.append(nextindent_str + "---------")
            else:
                strings.append(indent_str + repr(attribute))

        return "\n".join(strings)

    def __str__(self) -> str:
        """Handle str(dataset)."""
        return self._pretty_str()

    def top(self) -> str:
        """Return a :class:`str` representation of the top level
        attributes.
        """
        return self._pretty_str(top_level_only=True)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}, {len(self)} attribute(s)>"
