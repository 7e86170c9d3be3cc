#!/usr/bin/env python3
"""
Dictionary conversion pipeline.

Runs one VNR → Yagt conversion: load the XML export, map its terms and
write the shared dictionary JSON. Every step is fatal on failure; nothing
is written unless loading and mapping succeeded.
"""

from pathlib import Path
from typing import Any, Optional, Union

from .config import ConverterConfig
from .format_handlers import VnrXmlHandler, YagtJsonHandler
from .mapper import extract_term_records, map_terms


class ConversionError(Exception):
    """A conversion step failed; the message is user-facing."""


class DictionaryConverter:
    """
    Converts a single VNR dictionary file.

    Usage:
        converter = DictionaryConverter("gamedic.xml", "shareddict.json")
        converter.load()
        converter.convert()
        converter.save()
    """

    def __init__(
        self,
        source: Union[str, Path],
        output: Optional[Union[str, Path]] = None,
        config: Optional[ConverterConfig] = None,
    ):
        """
        Args:
            source: Path to the VNR XML export
            output: Path for the Yagt JSON file (config.output if omitted)
            config: Filter settings (defaults to ConverterConfig())
        """
        self.config = config or ConverterConfig()
        self.source_path = Path(source)
        self.output_path = Path(output or self.config.output)

        self.reader = VnrXmlHandler()
        self.writer = YagtJsonHandler()

        self.document: Optional[dict[str, Any]] = None
        self.result: Optional[dict[str, Any]] = None
        self.total_records = 0

    def load(self) -> dict[str, Any]:
        """
        Read and parse the source file.

        Raises:
            ConversionError: if the file cannot be read
            ValueError: if it is not well-formed XML or not rooted at <grimoire>
        """
        try:
            content = self.reader.read(self.source_path)
        except (OSError, UnicodeDecodeError) as e:
            raise ConversionError(f"file {self.source_path} load failed") from e

        errors = self.reader.validate_content(content)
        if errors:
            raise ValueError(errors[0])

        self.document = self.reader.parse(content)
        return self.document

    def convert(self) -> dict[str, Any]:
        """
        Map the loaded document to the Yagt structure.

        Raises:
            ValueError: if the document is not a VNR dictionary
        """
        if self.document is None:
            raise ConversionError("nothing loaded, call load() first")

        records = extract_term_records(self.document)
        self.total_records = len(records)
        self.result = {'terms': map_terms(records, self.config)}
        return self.result

    def save(self) -> Path:
        """
        Write the converted dictionary.

        Raises:
            ConversionError: if the file cannot be written
        """
        if self.result is None:
            raise ConversionError("nothing converted, call convert() first")

        try:
            return self.writer.write(self.result, self.output_path)
        except OSError as e:
            raise ConversionError(f"file {self.output_path} save failed") from e

    def get_stats(self) -> dict[str, Any]:
        """Summary of the last conversion."""
        output_terms = len(self.result['terms']) if self.result else 0
        return {
            "status": "ok",
            "source": str(self.source_path),
            "output": str(self.output_path),
            "stats": {
                "total_records": self.total_records,
                "output_terms": output_terms,
            },
        }

    def run(self) -> dict[str, Any]:
        """Load, convert and save in one go."""
        self.load()
        self.convert()
        self.save()
        return self.get_stats()


def convert(
    source: Union[str, Path],
    output: Optional[Union[str, Path]] = None,
    config: Optional[ConverterConfig] = None,
) -> dict[str, Any]:
    """Convert source to output and return the run summary."""
    return DictionaryConverter(source, output, config).run()
