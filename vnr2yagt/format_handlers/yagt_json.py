#!/usr/bin/env python3
"""
Yagt shared dictionary (shareddict.json) writer.
"""

import json
from pathlib import Path
from typing import Any, Union

from .base import FormatHandler


class YagtJsonHandler(FormatHandler):
    """
    Handler for Yagt shared dictionary files.

    Yagt JSON structure:
    ```json
    {
      "terms": [
        {
          "pattern": "/先輩/",
          "sourceLanguage": "ja",
          "en": "senpai",
          "comment": "honorific"
        }
      ]
    }
    ```
    """

    INDENT = 2

    @property
    def file_extensions(self) -> list[str]:
        return ["json"]

    def serialize(self, data: Any) -> str:
        """Serialize with 2-space indent, keeping non-ASCII text as-is."""
        return json.dumps(data, indent=self.INDENT, ensure_ascii=False)

    def write(self, data: Any, path: Union[str, Path]) -> Path:
        """
        Serialize data and write it to path as UTF-8.

        Returns:
            The path written to
        """
        output_path = Path(path)
        output_path.write_text(self.serialize(data), encoding="utf-8")
        return output_path
