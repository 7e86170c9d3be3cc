#!/usr/bin/env python3
"""
Tests for VnrXmlHandler.

Tests verify:
1. Attributes land under "$", leaf elements become plain strings
2. A tag seen once stays a single value, repeated tags become a list
3. Empty and attributed leaves follow the xml2js conventions
4. Malformed XML is reported as ValueError
"""

import pytest

from vnr2yagt.format_handlers import VnrXmlHandler


TEST_XML = """<?xml version="1.0" encoding="utf-8"?>
<grimoire version="1.0">
  <terms>
    <term id="1" type="trans">
      <sourceLanguage>ja</sourceLanguage>
      <language>en</language>
      <pattern>先輩</pattern>
      <text>senpai</text>
      <comment>honorific</comment>
    </term>
    <term id="2" type="trans">
      <sourceLanguage>ja</sourceLanguage>
      <language>en</language>
      <pattern>(.+)さん</pattern>
      <text>Mr. $1</text>
      <regex>true</regex>
    </term>
  </terms>
</grimoire>"""


@pytest.fixture
def handler():
    return VnrXmlHandler()


def test_root_element_wraps_tree(handler):
    tree = handler.parse(TEST_XML)

    assert list(tree) == ['grimoire']
    assert tree['grimoire']['$'] == {'version': '1.0'}


def test_repeated_terms_become_list(handler):
    terms = handler.parse(TEST_XML)['grimoire']['terms']['term']

    assert isinstance(terms, list)
    assert len(terms) == 2
    assert [t['$']['id'] for t in terms] == ['1', '2']


def test_term_fields_are_plain_strings(handler):
    first, second = handler.parse(TEST_XML)['grimoire']['terms']['term']

    assert first['$'] == {'id': '1', 'type': 'trans'}
    assert first['sourceLanguage'] == 'ja'
    assert first['pattern'] == '先輩'
    assert first['text'] == 'senpai'
    assert first['comment'] == 'honorific'
    assert 'regex' not in first
    assert second['regex'] == 'true'
    assert second['text'] == 'Mr. $1'


def test_indentation_whitespace_is_not_text(handler):
    tree = handler.parse(TEST_XML)

    assert '_' not in tree['grimoire']
    assert '_' not in tree['grimoire']['terms']


def test_single_term_is_not_wrapped(handler):
    xml = """<grimoire><terms>
        <term type="trans"><pattern>先輩</pattern></term>
    </terms></grimoire>"""

    term = handler.parse(xml)['grimoire']['terms']['term']

    assert isinstance(term, dict)
    assert term['pattern'] == '先輩'


def test_empty_leaf_is_empty_string(handler):
    xml = "<grimoire><terms><term><comment/><text></text></term></terms></grimoire>"

    term = handler.parse(xml)['grimoire']['terms']['term']

    assert term['comment'] == ''
    assert term['text'] == ''


def test_empty_terms_collection(handler):
    tree = handler.parse("<grimoire><terms/></grimoire>")

    assert tree['grimoire']['terms'] == ''


def test_attributed_leaf_keeps_text_under_underscore(handler):
    xml = '<grimoire><text lang="en">hi</text><flag on="1"/></grimoire>'

    tree = handler.parse(xml)['grimoire']

    assert tree['text'] == {'$': {'lang': 'en'}, '_': 'hi'}
    assert tree['flag'] == {'$': {'on': '1'}}


def test_mixed_content_text_is_kept(handler):
    tree = handler.parse("<grimoire>before<terms/>after</grimoire>")

    assert tree['grimoire']['_'] == 'beforeafter'
    assert tree['grimoire']['terms'] == ''


def test_invalid_xml_raises_value_error(handler):
    with pytest.raises(ValueError, match="Invalid XML"):
        handler.parse("<grimoire><terms></grimoire>")


def test_load_strips_bom(handler, tmp_path):
    path = tmp_path / "gamedic.xml"
    path.write_text("\ufeff" + TEST_XML, encoding="utf-8")

    tree = handler.load(path)

    assert len(tree['grimoire']['terms']['term']) == 2


def test_validate_content(handler):
    assert handler.validate_content(TEST_XML) == []

    errors = handler.validate_content("<resources/>")
    assert errors == ["Root element must be 'grimoire', found 'resources'"]

    errors = handler.validate_content("<grimoire>")
    assert len(errors) == 1
    assert errors[0].startswith("Invalid XML syntax")


@pytest.mark.parametrize("path,expected", [
    ("gamedic.xml", True),
    ("dicts/gamedic.xml", True),
    ("gamedic.json", False),
    ("gamedic.XML", False),
    ("gamedic.xml.bak", False),
])
def test_accepts_xml_paths(handler, path, expected):
    assert handler.accepts(path) is expected
