"""
vocab_terms.py
--------------

Which terms of the input vocabulary get a declaration, and in which category.

With --ontology the language profile's indices are used (object, datatype and
annotation properties, then a sweep over generic rdf:Property nodes to pick up
anything the schema forgot to type). Without it, plain rdf:type matching is
used. Individuals are found the same way in both modes: any resource whose
rdf:type is a URI under one of the included namespaces.
"""

from enum import Enum
from typing import Iterator, List, NamedTuple, Optional

from rdflib import URIRef, RDF, RDFS

from vocab_names import NameAllocator
from vocab_source import OntologySource, is_anonymous


class TermCategory(Enum):
    OBJECT_PROPERTY = ("object", "_PROP")
    DATATYPE_PROPERTY = ("datatype", "_PROP")
    ANNOTATION_PROPERTY = ("annotation", "_PROP")
    PROPERTY = ("generic", "_PROP")
    CLASS = ("class", "_CLASS")
    INDIVIDUAL = ("individual", "_INSTANCE")

    @property
    def kind(self) -> str:
        return self.value[0]

    @property
    def suffix(self) -> str:
        """Appended to the identifier when the plain name is already taken."""
        return self.value[1]


ONTOLOGY_PROPERTY_CATEGORIES = (
    TermCategory.OBJECT_PROPERTY,
    TermCategory.DATATYPE_PROPERTY,
    TermCategory.ANNOTATION_PROPERTY,
    TermCategory.PROPERTY,
)


class Candidate(NamedTuple):
    node: object
    category: TermCategory
    rdf_type: Optional[URIRef]


class TermFilter:
    """Decides whether a candidate term is written out."""

    def __init__(self, names: NameAllocator, include_uris: Optional[List[str]] = None):
        self.names = names
        self.include_uris = list(include_uris or [])

    def include(self, uri: str):
        if uri not in self.include_uris:
            self.include_uris.append(uri)

    def included_prefix(self, uri) -> Optional[str]:
        s = str(uri)
        for prefix in self.include_uris:
            if s.startswith(prefix):
                return prefix
        return None

    def accepts(self, node) -> bool:
        if is_anonymous(node):
            return False
        # already written once
        if node in self.names.resource_names:
            return False
        return self.included_prefix(node) is not None


def _typed_subjects(source: OntologySource, rdf_type: URIRef):
    subjects = {s for s, _, _ in source.list_statements(None, RDF.type, rdf_type)}
    return sorted(subjects, key=lambda n: str(n))


def _matched_type(source: OntologySource, node, types) -> URIRef:
    """The first of types that node is actually declared with."""
    for rdf_type in types:
        for _ in source.list_statements(node, RDF.type, rdf_type):
            return rdf_type
    return types[0]


def property_candidates(source: OntologySource, ontology: bool) -> Iterator[Candidate]:
    if not ontology:
        for s in _typed_subjects(source, RDF.Property):
            yield Candidate(s, TermCategory.PROPERTY, RDF.Property)
        return

    for category in ONTOLOGY_PROPERTY_CATEGORIES:
        types = source.profile.property_types(category.kind)
        for s in source.list_properties(category.kind):
            yield Candidate(s, category, _matched_type(source, s, types) if types else RDF.Property)


def class_candidates(source: OntologySource, ontology: bool) -> Iterator[Candidate]:
    if not ontology:
        for s in _typed_subjects(source, RDFS.Class):
            yield Candidate(s, TermCategory.CLASS, RDFS.Class)
        return

    for s in source.list_classes():
        yield Candidate(s, TermCategory.CLASS, _matched_type(source, s, source.profile.classes))


def individual_candidates(source: OntologySource, term_filter: TermFilter) -> Iterator[Candidate]:
    """
    Resources typed with a URI under an included namespace. rdf_type is the
    matched type; the caller turns it into the %valtype% binding.
    """
    for subject, rdf_type in source.list_typed_resources():
        if term_filter.included_prefix(rdf_type) is not None:
            yield Candidate(subject, TermCategory.INDIVIDUAL, rdf_type)
