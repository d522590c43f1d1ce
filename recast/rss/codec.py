"""RSS 2.0 parsing and serialization.

Items and channel metadata are kept as ElementTree elements so that every
field the proxy does not rewrite is written back out as it was read.
"""

import io
import re
import threading
import xml.etree.ElementTree as ET

from recast.errors import FeedParseError

# Prefixes ElementTree reserves for generated namespace names
_RESERVED_PREFIX = re.compile(r"ns\d+$")

_namespace_lock = threading.Lock()


class FeedItem:
    """A single ``<item>`` of an RSS channel."""

    def __init__(self, element: ET.Element):
        self.element = element

    def _text(self, tag: str) -> str | None:
        child = self.element.find(tag)
        if child is None:
            return None
        return child.text or ""

    def _set_text(self, tag: str, value: str) -> None:
        child = self.element.find(tag)
        if child is None:
            child = ET.SubElement(self.element, tag)
        child.text = value

    @property
    def title(self) -> str | None:
        return self._text("title")

    @property
    def pub_date(self) -> str | None:
        value = self._text("pubDate")
        return value.strip() if value is not None else None

    @pub_date.setter
    def pub_date(self, value: str) -> None:
        self._set_text("pubDate", value)

    @property
    def description(self) -> str | None:
        return self._text("description")

    @description.setter
    def description(self, value: str) -> None:
        self._set_text("description", value)


class FeedChannel:
    """A parsed RSS document: the ``<channel>`` metadata and its items."""

    def __init__(
        self,
        root: ET.Element,
        element: ET.Element,
        namespaces: dict[str, str] | None = None,
    ):
        self.root = root
        self.element = element
        # namespace URI -> prefix declared by the document
        self.namespaces = dict(namespaces or {})
        self.items = [FeedItem(e) for e in element.findall("item")]

    @property
    def title(self) -> str | None:
        return self.element.findtext("title")

    def set_items(self, items: list[FeedItem]) -> None:
        """Replace the channel's items, keeping them where the old ones were."""
        children = list(self.element)
        position = next(
            (i for i, child in enumerate(children) if child.tag == "item"),
            len(children),
        )
        for child in children:
            if child.tag == "item":
                self.element.remove(child)
        for offset, item in enumerate(items):
            self.element.insert(position + offset, item.element)
        self.items = list(items)


def parse_feed(content: bytes) -> FeedChannel:
    """Parse an RSS 2.0 document.

    Args:
        content: Raw bytes of the document

    Returns:
        The parsed channel, including the namespace prefixes it declares

    Raises:
        FeedParseError: If the bytes are not well-formed XML or not an RSS feed
    """
    root = None
    namespaces: dict[str, str] = {}
    try:
        for event, payload in ET.iterparse(
            io.BytesIO(content), events=("start", "start-ns")
        ):
            if event == "start-ns":
                prefix, uri = payload
                if (
                    prefix
                    and not _RESERVED_PREFIX.match(prefix)
                    and uri not in namespaces
                    and prefix not in namespaces.values()
                ):
                    namespaces[uri] = prefix
            elif root is None:
                root = payload
    except ET.ParseError as exc:
        raise FeedParseError(str(exc)) from exc

    if root is None or root.tag != "rss":
        raise FeedParseError("the input did not begin with an rss tag")

    channel = root.find("channel")
    if channel is None:
        raise FeedParseError("the input did not contain a channel element")

    return FeedChannel(root, channel, namespaces)


def serialize_feed(channel: FeedChannel) -> bytes:
    """Serialize a channel back into an RSS document.

    The channel's own namespace prefixes are applied for the duration of the
    call only; ElementTree's module-level prefix map is restored afterwards.
    """
    # ElementTree takes prefixes only from its module-level map
    namespace_map = ET._namespace_map
    with _namespace_lock:
        saved = dict(namespace_map)
        try:
            for uri, prefix in channel.namespaces.items():
                for known_uri, known_prefix in list(namespace_map.items()):
                    if known_prefix == prefix and known_uri != uri:
                        del namespace_map[known_uri]
                namespace_map[uri] = prefix
            return ET.tostring(channel.root, encoding="utf-8", xml_declaration=True)
        finally:
            namespace_map.clear()
            namespace_map.update(saved)
