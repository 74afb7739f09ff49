"""
vocab_dialects.py
-----------------

What the generated file looks like in each target language: imports, class
opening and closing, the model handle, namespace constants, default templates,
identifier rules and comment style.

The Python dialect writes an RDFLib module:

  from rdflib import Graph, URIRef
  from rdflib.namespace import OWL, RDF, RDFS

  class People:
      #: The RDF graph that holds the vocabulary terms
      _model = Graph()

      #: The namespace of the vocabulary as a string
      NS = "http://ex.org/people#"
      ...
      hasName = URIRef("http://ex.org/people#hasName")
      _model.add((hasName, RDF.type, OWL.DatatypeProperty))

The Java dialect writes a Jena vocabulary class in the classic schemagen
style.
"""

from abc import ABC, abstractmethod
from typing import FrozenSet, List, Optional, Tuple

from rdflib import URIRef, RDF, RDFS, OWL

from vocab_comments import CommentStyle, JAVADOC_STYLE, PYTHON_STYLE
from vocab_names import IdentifierGrammar, JAVA_GRAMMAR, PYTHON_GRAMMAR
from vocab_source import DAML, LanguageProfile, OWL_PROFILE
from vocab_terms import TermCategory


class Dialect(ABC):
    name: str = ""
    extension: str = ""
    #: identifiers the generated file declares itself; terms never take these
    reserved_names: FrozenSet[str] = frozenset()
    grammar: IdentifierGrammar = PYTHON_GRAMMAR
    comment_style: CommentStyle = PYTHON_STYLE

    @abstractmethod
    def imports(self, ontology: bool, profile: LanguageProfile = OWL_PROFILE) -> str:
        ...

    def header_lines(self, package: Optional[str], ontology: bool,
                     profile: LanguageProfile = OWL_PROFILE) -> List[str]:
        return self.imports(ontology, profile).split("\n") + [""]

    @abstractmethod
    def class_open(self, class_name: str, class_dec: Optional[str]) -> str:
        ...

    def class_close(self) -> Optional[str]:
        return None

    @abstractmethod
    def model_declaration(self, ontology: bool, profile: LanguageProfile = OWL_PROFILE) -> List[str]:
        ...

    @abstractmethod
    def namespace_declarations(self, base_uri: str) -> List[str]:
        ...

    @abstractmethod
    def templates(self, ontology: bool) -> Tuple[str, str, str]:
        """Default (property, class, individual) templates."""

    @abstractmethod
    def value_kind(self, category: TermCategory, ontology: bool, rdf_type: Optional[URIRef]) -> Tuple[str, str]:
        """The %valclass% and %valcreator% bindings for a term."""

    @abstractmethod
    def class_constructor(self, uri: str) -> str:
        """Inline expression for a class that has no generated constant."""


# --------------------
# Python / RDFLib
# --------------------
PY_VALUE_TEMPLATE = '%valname% = %valcreator%("%valuri%")'
PY_TYPED_VALUE_TEMPLATE = PY_VALUE_TEMPLATE + '%nl%    _model.add((%valname%, RDF.type, %valclass%))'
PY_INDIVIDUAL_TEMPLATE = PY_VALUE_TEMPLATE + '%nl%    _model.add((%valname%, RDF.type, %valtype%))'

_PY_NAMESPACES = ((str(OWL), "OWL"), (str(RDFS), "RDFS"), (str(RDF), "RDF"), (str(DAML), "DAML"))


def _py_term(uri) -> str:
    s = str(uri)
    for ns, prefix in _PY_NAMESPACES:
        local = s[len(ns):]
        if s.startswith(ns) and local.isidentifier():
            return f"{prefix}.{local}"
    return f'URIRef("{s}")'


class PythonDialect(Dialect):
    name = "python"
    extension = ".py"
    reserved_names = frozenset({
        "_model", "NS", "NAMESPACE", "Graph", "URIRef", "Namespace", "RDF", "RDFS", "OWL", "DAML",
    })
    grammar = PYTHON_GRAMMAR
    comment_style = PYTHON_STYLE

    def imports(self, ontology, profile=OWL_PROFILE):
        if not ontology:
            return "from rdflib import Graph, URIRef"
        lines = ["from rdflib import Graph, URIRef", "from rdflib.namespace import OWL, RDF, RDFS"]
        if profile.name == "DAML":
            lines[0] = "from rdflib import Graph, Namespace, URIRef"
            lines.append("")
            lines.append(f'DAML = Namespace("{DAML}")')
        return "\n".join(lines)

    def header_lines(self, package, ontology, profile=OWL_PROFILE):
        return super().header_lines(package, ontology, profile) + [""]

    def class_open(self, class_name, class_dec):
        return f"class {class_name}{class_dec or ''}:"

    def model_declaration(self, ontology, profile=OWL_PROFILE):
        return [
            "#: The RDF graph that holds the vocabulary terms",
            "_model = Graph()",
            "",
        ]

    def namespace_declarations(self, base_uri):
        return [
            "#: The namespace of the vocabulary as a string",
            f'NS = "{base_uri}"',
            "",
            "#: The namespace of the vocabulary as a resource",
            f'NAMESPACE = URIRef("{base_uri}")',
            "",
        ]

    def templates(self, ontology):
        if ontology:
            return PY_TYPED_VALUE_TEMPLATE, PY_TYPED_VALUE_TEMPLATE, PY_INDIVIDUAL_TEMPLATE
        return PY_VALUE_TEMPLATE, PY_VALUE_TEMPLATE, PY_VALUE_TEMPLATE

    def value_kind(self, category, ontology, rdf_type):
        if category is TermCategory.INDIVIDUAL:
            return "RDFS.Resource", "URIRef"
        return (_py_term(rdf_type) if rdf_type is not None else "RDFS.Resource"), "URIRef"

    def class_constructor(self, uri):
        return f'URIRef("{uri}")'


# --------------------
# Java / Jena
# --------------------
JAVA_TEMPLATE = 'public static final %valclass% %valname% = m_model.%valcreator%( "%valuri%" );'
JAVA_INDIVIDUAL_TEMPLATE = 'public static final %valclass% %valname% = m_model.%valcreator%( %valtype%, "%valuri%" );'

_JAVA_ONT_KINDS = {
    TermCategory.OBJECT_PROPERTY: ("ObjectProperty", "createObjectProperty"),
    TermCategory.DATATYPE_PROPERTY: ("DatatypeProperty", "createDatatypeProperty"),
    TermCategory.ANNOTATION_PROPERTY: ("AnnotationProperty", "createAnnotationProperty"),
    TermCategory.PROPERTY: ("Property", "createProperty"),
    TermCategory.CLASS: ("OntClass", "createClass"),
    TermCategory.INDIVIDUAL: ("Individual", "createIndividual"),
}

_JAVA_RDF_KINDS = {
    TermCategory.PROPERTY: ("Property", "createProperty"),
    TermCategory.CLASS: ("Resource", "createResource"),
    TermCategory.INDIVIDUAL: ("Resource", "createResource"),
}


class JavaDialect(Dialect):
    name = "java"
    extension = ".java"
    reserved_names = frozenset({"m_model", "NS", "NAMESPACE"})
    grammar = JAVA_GRAMMAR
    comment_style = JAVADOC_STYLE

    def imports(self, ontology, profile=OWL_PROFILE):
        lines = ["import org.apache.jena.rdf.model.*;"]
        if ontology:
            lines.append("import org.apache.jena.ontology.*;")
        return "\n".join(lines)

    def header_lines(self, package, ontology, profile=OWL_PROFILE):
        lines = [f"package {package};", ""] if package else []
        return lines + super().header_lines(package, ontology, profile)

    def class_open(self, class_name, class_dec):
        dec = f"{class_dec} " if class_dec else ""
        return f"public class {class_name} {dec}{{"

    def class_close(self):
        return "}"

    def model_declaration(self, ontology, profile=OWL_PROFILE):
        if ontology:
            lang = "DAML" if profile.name == "DAML" else "OWL"
            return [
                "/** The ontology model that holds the vocabulary terms */",
                f"private static OntModel m_model = ModelFactory.createOntologyModel( ProfileRegistry.{lang}_LANG );",
                "",
            ]
        return [
            "/** The RDF model that holds the vocabulary terms */",
            "private static Model m_model = ModelFactory.createDefaultModel();",
            "",
        ]

    def namespace_declarations(self, base_uri):
        return [
            "/** The namespace of the vocabulary as a string {@value} */",
            f'public static final String NS = "{base_uri}";',
            "",
            "/** The namespace of the vocabulary as a resource {@value} */",
            f'public static final Resource NAMESPACE = m_model.createResource( "{base_uri}" );',
            "",
        ]

    def templates(self, ontology):
        if ontology:
            return JAVA_TEMPLATE, JAVA_TEMPLATE, JAVA_INDIVIDUAL_TEMPLATE
        return JAVA_TEMPLATE, JAVA_TEMPLATE, JAVA_TEMPLATE

    def value_kind(self, category, ontology, rdf_type):
        kinds = _JAVA_ONT_KINDS if ontology else _JAVA_RDF_KINDS
        return kinds.get(category, ("Resource", "createResource"))

    def class_constructor(self, uri):
        return f'm_model.createClass( "{uri}" )'


PYTHON = PythonDialect()
JAVA = JavaDialect()

DIALECTS = {d.name: d for d in (PYTHON, JAVA)}


def get_dialect(name: Optional[str]) -> Dialect:
    if name is None:
        return PYTHON
    try:
        return DIALECTS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown target language '{name}'; expected one of {sorted(DIALECTS)}")
