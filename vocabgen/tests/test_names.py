import pytest
from rdflib import URIRef

from vocab_names import (
    JAVA_GRAMMAR, PYTHON_GRAMMAR, NameAllocator, as_legal_identifier, local_name, uppercase_name,
)

URIS = [
    "http://ex.org/v#hasName",
    "http://ex.org/v#has-name",
    "http://ex.org/v#1stPlace",
    "http://ex.org/v#café",
    "http://ex.org/v/path/segment",
    "http://ex.org/v#class",
    "http://ex.org/v#a.b.c",
]


def test_local_name():
    assert local_name(URIRef("http://ex.org/v#hasName")) == "hasName"
    assert local_name(URIRef("http://ex.org/v/path/segment")) == "segment"
    assert local_name(URIRef("http://ex.org/v#")) == ""


def test_uppercase_name():
    assert uppercase_name("hasName") == "HAS_NAME"
    assert uppercase_name("hasURL") == "HAS_URL"
    assert uppercase_name("URLPath") == "URLPATH"
    assert uppercase_name("name") == "NAME"


def test_as_legal_identifier():
    assert as_legal_identifier("has-name", PYTHON_GRAMMAR) == "has_name"
    assert as_legal_identifier("1stPlace", PYTHON_GRAMMAR) == "stPlace"
    assert as_legal_identifier("people", PYTHON_GRAMMAR, capitalize=True) == "People"
    assert as_legal_identifier("123", PYTHON_GRAMMAR) is None
    assert as_legal_identifier("", PYTHON_GRAMMAR) is None


def test_reserved_words_get_trailing_underscore():
    assert as_legal_identifier("class", PYTHON_GRAMMAR) == "class_"
    assert as_legal_identifier("None", PYTHON_GRAMMAR) == "None_"
    assert as_legal_identifier("class", JAVA_GRAMMAR) == "class_"
    assert as_legal_identifier("None", JAVA_GRAMMAR) == "None"


def test_dollar_is_java_only():
    assert as_legal_identifier("$ref", JAVA_GRAMMAR) == "$ref"
    assert as_legal_identifier("$ref", PYTHON_GRAMMAR) == "ref"
    assert as_legal_identifier("a$b", PYTHON_GRAMMAR) == "a_b"


@pytest.mark.parametrize("grammar", [PYTHON_GRAMMAR, JAVA_GRAMMAR])
@pytest.mark.parametrize("uppercase", [False, True])
def test_allocated_names_are_legal(grammar, uppercase):
    names = NameAllocator(grammar, uppercase=uppercase)
    for uri in URIS:
        name = names.allocate(URIRef(uri), "_PROP")
        assert name is not None
        assert grammar.is_start(name[0])
        assert all(grammar.is_part(c) for c in name[1:])
        assert name not in grammar.reserved


def test_collisions_get_suffix_then_counter():
    names = NameAllocator(PYTHON_GRAMMAR)
    assert names.allocate(URIRef("http://ex.org/v#Foo"), "_CLASS") == "Foo"
    assert names.allocate(URIRef("http://ex.org/w#Foo"), "_PROP") == "Foo_PROP"
    assert names.allocate(URIRef("http://ex.org/x#Foo"), "_PROP") == "Foo_PROP1"
    assert names.allocate(URIRef("http://ex.org/y#Foo"), "_PROP") == "Foo_PROP2"
    assert len(names.used_names) == 4


def test_case_is_not_folded():
    names = NameAllocator(PYTHON_GRAMMAR)
    assert names.allocate(URIRef("http://ex.org/v#Foo"), "_CLASS") == "Foo"
    assert names.allocate(URIRef("http://ex.org/v#foo"), "_PROP") == "foo"


def test_sanitized_collision():
    names = NameAllocator(PYTHON_GRAMMAR)
    assert names.allocate(URIRef("http://ex.org/v#has-name"), "_PROP") == "has_name"
    assert names.allocate(URIRef("http://ex.org/v#has_name"), "_PROP") == "has_name_PROP"


def test_uri_keeps_its_name():
    names = NameAllocator(PYTHON_GRAMMAR)
    uri = URIRef("http://ex.org/v#Foo")
    first = names.allocate(uri, "_CLASS")
    assert names.allocate(uri, "_PROP") == first
    assert names.name_for(uri) == first
    assert names.used_names == {first}


def test_uppercase_allocation():
    names = NameAllocator(JAVA_GRAMMAR, uppercase=True)
    assert names.allocate(URIRef("http://ex.org/v#hasName"), "_PROP") == "HAS_NAME"


def test_no_local_name_is_skipped():
    names = NameAllocator(PYTHON_GRAMMAR)
    uri = URIRef("http://ex.org/v#")
    assert names.allocate(uri, "_PROP") is None
    assert uri not in names.resource_names
    assert not names.used_names


def test_allocators_do_not_share_state():
    a = NameAllocator(PYTHON_GRAMMAR)
    b = NameAllocator(PYTHON_GRAMMAR)
    a.allocate(URIRef("http://ex.org/v#Foo"), "_CLASS")
    assert b.allocate(URIRef("http://ex.org/w#Foo"), "_CLASS") == "Foo"
