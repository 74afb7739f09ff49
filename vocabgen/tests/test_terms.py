from rdflib import OWL, RDFS, BNode, Graph, URIRef

from vocab_names import PYTHON_GRAMMAR, NameAllocator
from vocab_source import DAML_PROFILE, OntologySource
from vocab_terms import (
    TermCategory, TermFilter, class_candidates, individual_candidates, property_candidates,
)

V = "http://ex.org/v#"


def test_ontology_properties_in_category_order(source):
    found = [(str(c.node), c.category) for c in property_candidates(source, ontology=True)]
    assert found == [
        (V + "knows", TermCategory.OBJECT_PROPERTY),
        (V + "hasName", TermCategory.DATATYPE_PROPERTY),
        (V + "note", TermCategory.ANNOTATION_PROPERTY),
        (V + "related", TermCategory.PROPERTY),
    ]


def test_plain_properties_use_rdf_property_only(source):
    found = [str(c.node) for c in property_candidates(source, ontology=False)]
    assert found == [V + "related"]


def test_plain_classes_use_rdfs_class(source):
    assert list(class_candidates(source, ontology=False)) == []


def test_ontology_classes(source):
    nodes = [c.node for c in class_candidates(source, ontology=True)]
    assert URIRef(V + "Person") in nodes
    assert URIRef("http://other.org/x#Alien") in nodes
    assert any(isinstance(n, BNode) for n in nodes)


def test_filter(source):
    names = NameAllocator(PYTHON_GRAMMAR)
    term_filter = TermFilter(names, [V])

    assert term_filter.accepts(URIRef(V + "Person"))
    assert not term_filter.accepts(URIRef("http://other.org/x#Alien"))
    assert not term_filter.accepts(BNode())

    names.allocate(URIRef(V + "Person"), TermCategory.CLASS.suffix)
    assert not term_filter.accepts(URIRef(V + "Person"))


def test_filter_include_is_idempotent():
    term_filter = TermFilter(NameAllocator(PYTHON_GRAMMAR))
    assert not term_filter.accepts(URIRef(V + "Person"))
    term_filter.include(V)
    term_filter.include(V)
    assert term_filter.include_uris == [V]
    assert term_filter.accepts(URIRef(V + "Person"))


def test_individuals_need_an_included_type(source):
    term_filter = TermFilter(NameAllocator(PYTHON_GRAMMAR), [V])
    found = [(str(c.node), str(c.rdf_type)) for c in individual_candidates(source, term_filter)]
    assert found == [(V + "alice", V + "Person"), (V + "bob", V + "Robot")]

    assert list(individual_candidates(source, TermFilter(NameAllocator(PYTHON_GRAMMAR)))) == []


def test_suffixes():
    assert TermCategory.OBJECT_PROPERTY.suffix == "_PROP"
    assert TermCategory.PROPERTY.suffix == "_PROP"
    assert TermCategory.CLASS.suffix == "_CLASS"
    assert TermCategory.INDIVIDUAL.suffix == "_INSTANCE"
    assert len(TermCategory) == 6


def test_source_questions(source):
    assert source.ontology_uri() == URIRef("http://ex.org/v")
    assert source.comment_for(URIRef(V + "Person")) == "A human being."
    assert source.comment_for(URIRef(V + "knows")) is None


def test_daml_profile():
    g = Graph().parse(data="""
        @prefix daml: <http://www.daml.org/2001/03/daml+oil#> .
        @prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
        <http://ex.org/d> a daml:Ontology .
        <http://ex.org/d#owns> a daml:ObjectProperty ; daml:comment "Ownership." ; rdfs:comment "Has." .
        <http://ex.org/d#Car> a daml:Class .
    """, format="turtle")
    source = OntologySource(g, DAML_PROFILE)

    assert source.ontology_uri() == URIRef("http://ex.org/d")
    assert source.list_properties("object") == [URIRef("http://ex.org/d#owns")]
    assert source.list_properties("annotation") == []
    assert source.list_classes() == [URIRef("http://ex.org/d#Car")]
    assert source.comment_for(URIRef("http://ex.org/d#owns")) == "Has. Ownership."


def test_ontology_class_carries_the_matched_type():
    g = Graph().parse(data="""
        @prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
        @prefix owl: <http://www.w3.org/2002/07/owl#> .
        <http://ex.org/v#A> a owl:Class .
        <http://ex.org/v#B> a rdfs:Class .
        <http://ex.org/v#C> a rdfs:Class, owl:Class .
    """, format="turtle")
    found = {str(c.node): c.rdf_type for c in class_candidates(OntologySource(g), ontology=True)}
    assert found == {V + "A": OWL.Class, V + "B": RDFS.Class, V + "C": OWL.Class}
