#!/usr/bin/env python3
"""
VNR → Yagt term mapping.

Takes the tree produced by VnrXmlHandler, keeps the translation terms
worth sharing and groups them by pattern:

    records = extract_term_records(tree)     # grimoire/terms/term
    output = map_terms(records)              # filter, merge, flatten
    yagt = vnr_to_yagt_format(tree)          # both, wrapped in {"terms": ...}

Filtering rules for a term (see SourceTerm.is_eligible):
- source language is one of the configured ones ("ja" by default)
- ``type`` attribute is "trans"
- language, text and pattern are present
- pattern is not a number and is at least two characters long

Terms that share a pattern key collapse into one output term. A regex
pattern "foo" has key "/foo/" and never collides with the plain "foo".
"""

from typing import Any, Iterable, Optional

from .config import ConverterConfig
from .terms import MergedTerm, SourceTerm


def extract_term_records(document: Any) -> list[Any]:
    """
    Get the raw ``<term>`` records from a parsed VNR document.

    Args:
        document: Tree from VnrXmlHandler.parse

    Returns:
        List of term records in document order (may be empty)

    Raises:
        ValueError: if the document has no <grimoire> root
    """
    if not isinstance(document, dict) or 'grimoire' not in document:
        raise ValueError("Not a VNR dictionary: missing <grimoire> root element")

    grimoire = document['grimoire']
    terms = grimoire.get('terms') if isinstance(grimoire, dict) else None
    # <terms/> or <terms></terms> parse to a string
    if not isinstance(terms, dict):
        return []

    records = terms.get('term')
    if records is None:
        return []
    # A lone <term> is not wrapped in a list
    if not isinstance(records, list):
        return [records]
    return records


def map_terms(
    records: Iterable[Any],
    config: Optional[ConverterConfig] = None,
) -> list[dict[str, Any]]:
    """
    Filter and merge VNR term records into Yagt output terms.

    Args:
        records: Raw term records, in document order
        config: Filter settings (defaults to ConverterConfig())

    Returns:
        One dict per distinct pattern key, in first-seen order
    """
    config = config or ConverterConfig()
    merged: dict[str, MergedTerm] = {}

    for record in records:
        term = SourceTerm.from_record(record)
        if not term.is_eligible(config):
            continue

        key = term.pattern_key()
        if key in merged:
            merged[key].merge(term)
        else:
            merged[key] = MergedTerm.from_term(term)

    return [term.to_dict(key) for key, term in merged.items()]


def vnr_to_yagt_format(
    document: Any,
    config: Optional[ConverterConfig] = None,
) -> dict[str, list[dict[str, Any]]]:
    """Convert a parsed VNR document into a Yagt shared dictionary."""
    return {'terms': map_terms(extract_term_records(document), config)}
