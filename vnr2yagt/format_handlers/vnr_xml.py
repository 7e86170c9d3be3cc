#!/usr/bin/env python3
"""
VNR shared dictionary (gamedic.xml) reader.

Turns the XML export into nested dicts and strings without interpreting
any term fields; the mapper decides what is a usable term.
"""

from pathlib import Path
from typing import Any, Union
from xml.etree import ElementTree as ET

from .base import FormatHandler

ATTR_KEY = '$'
CHAR_KEY = '_'


class VnrXmlHandler(FormatHandler):
    """
    Handler for VNR shared dictionary exports.

    VNR XML structure:
    ```xml
    <?xml version="1.0" encoding="utf-8"?>
    <grimoire version="1.0">
      <terms>
        <term id="42" type="trans">
          <sourceLanguage>ja</sourceLanguage>
          <language>en</language>
          <pattern>先輩</pattern>
          <text>senpai</text>
          <regex>true</regex>
          <comment>honorific</comment>
        </term>
      </terms>
    </grimoire>
    ```

    The tree is built the way xml2js does with ``explicitArray: false``:

    - attributes go under ``"$"``
    - a leaf element without attributes becomes its text
    - a tag seen once is a single value, a repeated tag becomes a list
    - non-blank text of an element with attributes or children goes
      under ``"_"``
    """

    ROOT_TAG = 'grimoire'

    @property
    def file_extensions(self) -> list[str]:
        return ["xml"]

    def read(self, path: Union[str, Path]) -> str:
        """Read file text, dropping a UTF-8 BOM if present."""
        return Path(path).read_text(encoding="utf-8-sig")

    def parse(self, content: str) -> dict[str, Any]:
        """
        Parse XML content into a nested tree.

        Args:
            content: Raw XML file content

        Returns:
            ``{root_tag: value}`` where value follows the rules above

        Raises:
            ValueError: if the content is not well-formed XML
        """
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise ValueError(f"Invalid XML: {e}")

        return {root.tag: self._element_to_value(root)}

    def load(self, path: Union[str, Path]) -> dict[str, Any]:
        """Read and parse a file in one step."""
        return self.parse(self.read(path))

    def _element_to_value(self, elem: ET.Element) -> Union[str, dict[str, Any]]:
        """Convert one element (recursively) to a string or dict."""
        children = list(elem)
        text = elem.text or ''

        if not elem.attrib and not children:
            return text

        node: dict[str, Any] = {}
        if elem.attrib:
            node[ATTR_KEY] = dict(elem.attrib)

        for child in children:
            value = self._element_to_value(child)
            if child.tag not in node:
                node[child.tag] = value
            elif isinstance(node[child.tag], list):
                node[child.tag].append(value)
            else:
                node[child.tag] = [node[child.tag], value]

        # Mixed content: text before, between and after children
        chars = text + ''.join(child.tail or '' for child in children)
        if chars.strip():
            node[CHAR_KEY] = chars

        return node

    def validate_content(self, content: str) -> list[str]:
        """Validate VNR XML format."""
        errors = []

        try:
            root = ET.fromstring(content)
            if root.tag != self.ROOT_TAG:
                errors.append(f"Root element must be '{self.ROOT_TAG}', found '{root.tag}'")
        except ET.ParseError as e:
            errors.append(f"Invalid XML syntax: {e}")

        return errors
