"""
vnr2yagt - convert VNR shared dictionaries to Yagt format

Reads the gamedic.xml export of Visual Novel Reader and writes the
shareddict.json that Yagt loads, keeping only Japanese translation terms
and merging duplicates by pattern.

Quick start:
    vnr2yagt -s gamedic.xml -o shareddict.json

Or from Python:
    from vnr2yagt import convert
    convert("gamedic.xml", "shareddict.json")
"""

__version__ = "1.0.0"

from .config import ConverterConfig, load_config
from .converter import ConversionError, DictionaryConverter, convert
from .mapper import extract_term_records, map_terms, vnr_to_yagt_format
from .terms import MergedTerm, SourceTerm

__all__ = [
    "ConverterConfig",
    "load_config",
    "ConversionError",
    "DictionaryConverter",
    "convert",
    "extract_term_records",
    "map_terms",
    "vnr_to_yagt_format",
    "MergedTerm",
    "SourceTerm",
]
