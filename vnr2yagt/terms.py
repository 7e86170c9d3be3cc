#!/usr/bin/env python3
"""
Term records on both sides of the conversion.

SourceTerm is one VNR ``<term>`` as read from the parsed XML tree.
MergedTerm accumulates every eligible SourceTerm sharing a pattern key
and flattens into one Yagt output term.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from .config import ConverterConfig

# Whitespace JavaScript's Number() trims: WhiteSpace and LineTerminator
JS_WHITESPACE = (
    '\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005'
    '\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff'
)

# Strings JavaScript's Number() accepts, i.e. the patterns isNaN() rejects.
# ASCII digits only: full-width "４２" is NaN in JavaScript.
NUMERIC_PATTERN = re.compile(
    r'^(?:[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)'
    r'|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+)$'
)


def is_numeric(value: str) -> bool:
    """
    Check whether a pattern is purely numeric.

    Surrounding whitespace is ignored and a blank string counts as
    numeric (it reads as 0), so "42", " 3.5 ", "1e3" and "0x1F" all match.
    Non-ASCII digits ("４２", "٤٢") do not.
    """
    stripped = value.strip(JS_WHITESPACE)
    if not stripped:
        return True
    return NUMERIC_PATTERN.match(stripped) is not None


def _scalar(value: Any) -> Optional[str]:
    """Text of a field: plain strings as-is, text of an attributed element."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        text = value.get('_')
        return text if isinstance(text, str) else None
    return None


@dataclass(frozen=True)
class SourceTerm:
    """
    One VNR term record.

    Attributes:
        source_language: Language of the original text (``sourceLanguage``)
        language: Language of the translation
        text: Translated text
        pattern: Text or regex matched in the original
        term_type: ``type`` attribute, ``"trans"`` for translations
        regex: ``"true"`` when pattern is a regular expression
        comment: Optional translator note
    """
    source_language: Optional[str]
    language: Optional[str]
    text: Optional[str]
    pattern: Optional[str]
    term_type: Optional[str] = None
    regex: Optional[str] = None
    comment: Optional[str] = None

    @classmethod
    def from_record(cls, record: Any) -> "SourceTerm":
        """Build from a parsed ``<term>`` node; missing fields become None."""
        if not isinstance(record, dict):
            return cls(None, None, None, None)

        attrs = record.get('$')
        attrs = attrs if isinstance(attrs, dict) else {}

        return cls(
            source_language=_scalar(record.get('sourceLanguage')),
            language=_scalar(record.get('language')),
            text=_scalar(record.get('text')),
            pattern=_scalar(record.get('pattern')),
            term_type=attrs.get('type'),
            regex=_scalar(record.get('regex')),
            comment=_scalar(record.get('comment')),
        )

    @property
    def is_regex(self) -> bool:
        return self.regex == "true"

    def is_eligible(self, config: ConverterConfig) -> bool:
        """Whether this term takes part in the conversion."""
        return (
            self.source_language in config.source_languages
            and self.term_type == config.term_type
            and bool(self.language)
            and bool(self.text)
            and bool(self.pattern)
            and not is_numeric(self.pattern)
            and len(self.pattern) >= config.min_pattern_length
        )

    def pattern_key(self) -> str:
        """Output pattern: regex patterns are wrapped in slashes."""
        if self.is_regex:
            return f"/{self.pattern}/"
        return self.pattern


@dataclass
class MergedTerm:
    """
    All eligible terms sharing one pattern key.

    Attributes:
        source_languages: Distinct source languages, first-seen order
        translations: Target language -> latest text
        comment: First comment seen for this pattern
    """
    source_languages: list[str] = field(default_factory=list)
    translations: dict[str, str] = field(default_factory=dict)
    comment: Optional[str] = None

    @classmethod
    def from_term(cls, term: SourceTerm) -> "MergedTerm":
        merged = cls()
        merged.merge(term)
        return merged

    @property
    def has_multiple_source_languages(self) -> bool:
        return len(self.source_languages) > 1

    def merge(self, term: SourceTerm) -> None:
        """Fold one more eligible term into this record."""
        if term.source_language not in self.source_languages:
            self.source_languages.append(term.source_language)

        # Last write wins per target language
        self.translations[term.language] = term.text

        if self.comment is None and term.comment:
            self.comment = term.comment

    def to_dict(self, pattern: str) -> dict[str, Any]:
        """
        Flatten into a Yagt output term.

        A single source language is written as ``sourceLanguage``; two or
        more replace it with the ``sourceLanguages`` list.
        """
        result: dict[str, Any] = {'pattern': pattern}

        if self.has_multiple_source_languages:
            result['sourceLanguages'] = list(self.source_languages)
        else:
            result['sourceLanguage'] = self.source_languages[0]

        result.update(self.translations)

        if self.comment:
            result['comment'] = self.comment

        return result
