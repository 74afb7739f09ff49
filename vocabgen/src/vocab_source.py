"""
vocab_source.py
---------------

Loads the input vocabulary with RDFLib and answers the handful of questions the
generator asks about it: which properties, classes and typed resources it
declares, what the ontology header is, and what a term's comment says.

Only asserted triples are used. owl:imports is not followed.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from rdflib import BNode, Graph, Literal, Namespace, URIRef, RDF, RDFS, OWL
from rdflib.util import guess_format

from vocab_options import ConfigurationError

DAML = Namespace("http://www.daml.org/2001/03/daml+oil#")

PROPERTY_KINDS = ("object", "datatype", "annotation", "generic")


@dataclass(frozen=True)
class LanguageProfile:
    """The RDF types that identify each kind of term in one ontology language."""
    name: str
    ontology: URIRef
    classes: Tuple[URIRef, ...]
    object_properties: Tuple[URIRef, ...]
    datatype_properties: Tuple[URIRef, ...]
    annotation_properties: Tuple[URIRef, ...]
    generic_properties: Tuple[URIRef, ...]
    comments: Tuple[URIRef, ...]

    def property_types(self, kind: str) -> Tuple[URIRef, ...]:
        if kind == "object":
            return self.object_properties
        if kind == "datatype":
            return self.datatype_properties
        if kind == "annotation":
            return self.annotation_properties
        if kind == "generic":
            return self.generic_properties
        raise ValueError(f"Unknown property kind '{kind}'; expected one of {PROPERTY_KINDS}")


OWL_PROFILE = LanguageProfile(
    name="OWL",
    ontology=OWL.Ontology,
    classes=(OWL.Class, RDFS.Class),
    object_properties=(OWL.ObjectProperty,),
    datatype_properties=(OWL.DatatypeProperty,),
    annotation_properties=(OWL.AnnotationProperty,),
    generic_properties=(RDF.Property,),
    comments=(RDFS.comment,),
)

DAML_PROFILE = LanguageProfile(
    name="DAML",
    ontology=DAML.Ontology,
    classes=(DAML.Class, RDFS.Class),
    object_properties=(DAML.ObjectProperty,),
    datatype_properties=(DAML.DatatypeProperty,),
    annotation_properties=(),
    generic_properties=(RDF.Property, DAML.Property),
    comments=(RDFS.comment, DAML.comment),
)


def _sorted_nodes(nodes):
    """Deduplicate, then order by string form so output is stable."""
    return sorted(set(nodes), key=lambda n: str(n))


class OntologySource:
    """Read-only view of the input vocabulary under one language profile."""

    def __init__(self, graph: Graph, profile: LanguageProfile = OWL_PROFILE):
        self.graph = graph
        self.profile = profile

    def _subjects_of_types(self, types) -> Iterator:
        for t in types:
            yield from self.graph.subjects(RDF.type, t)

    def list_properties(self, kind: str):
        return _sorted_nodes(self._subjects_of_types(self.profile.property_types(kind)))

    def list_classes(self):
        return _sorted_nodes(self._subjects_of_types(self.profile.classes))

    def list_typed_resources(self):
        """Every (subject, type) pair of an rdf:type statement whose type is a URI."""
        pairs = {(s, o) for s, o in self.graph.subject_objects(RDF.type) if isinstance(o, URIRef)}
        return sorted(pairs, key=lambda p: (str(p[0]), str(p[1])))

    def list_statements(self, subject=None, predicate=None, obj=None):
        return self.graph.triples((subject, predicate, obj))

    def ontology_uri(self) -> Optional[URIRef]:
        for s in _sorted_nodes(self.graph.subjects(RDF.type, self.profile.ontology)):
            if isinstance(s, URIRef):
                return s
        return None

    def comment_for(self, term) -> Optional[str]:
        parts = []
        for prop in self.profile.comments:
            for _, _, c in self.graph.triples((term, prop, None)):
                text = str(c).strip() if isinstance(c, Literal) else ""
                if text:
                    parts.append(text)
        return " ".join(parts) if parts else None


def load_source(location: str, profile: LanguageProfile = OWL_PROFILE) -> OntologySource:
    """Parse the input document (format guessed from its name, else RDFLib's default)."""
    g = Graph()
    try:
        fmt = guess_format(str(location))
        if fmt:
            g.parse(str(location), format=fmt)
        else:
            g.parse(str(location))
    except Exception as e:
        raise ConfigurationError(f"Failed to read input source {location}", e)
    return OntologySource(g, profile)


def is_anonymous(node) -> bool:
    return isinstance(node, BNode)
