import pytest
from rdflib import Graph

from vocab_source import OntologySource

VOCAB_TTL = """
@prefix :     <http://ex.org/v#> .
@prefix rdf:  <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix owl:  <http://www.w3.org/2002/07/owl#> .

<http://ex.org/v> a owl:Ontology .

:knows a owl:ObjectProperty .
:hasName a owl:DatatypeProperty ; rdfs:comment "The name of a person." .
:note a owl:AnnotationProperty .
:related a rdf:Property .

:Person a owl:Class ; rdfs:comment "A human being." .
<http://other.org/x#Alien> a owl:Class .
[] a owl:Class .

:alice a :Person .
:bob a :Robot .
"""


@pytest.fixture
def vocab_graph():
    return Graph().parse(data=VOCAB_TTL, format="turtle")


@pytest.fixture
def source(vocab_graph):
    return OntologySource(vocab_graph)


@pytest.fixture
def vocab_file(tmp_path):
    path = tmp_path / "vocab.ttl"
    path.write_text(VOCAB_TTL, encoding="utf-8")
    return path
