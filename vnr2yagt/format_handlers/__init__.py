#!/usr/bin/env python3
"""
Format handlers for shared dictionary files.

Supported formats:
- VNR: gamedic.xml export (read only)
- Yagt: shareddict.json (write only)
"""

from .base import FormatHandler
from .vnr_xml import VnrXmlHandler
from .yagt_json import YagtJsonHandler

__all__ = [
    'FormatHandler',
    'VnrXmlHandler',
    'YagtJsonHandler',
]
