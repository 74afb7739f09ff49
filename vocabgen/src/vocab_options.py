"""
vocab_options.py
----------------

Options for the vocabulary generator. Every option can be given on the command
line, or as a property of the root resource of an RDF configuration document:

  @prefix vocab: <http://jena.hpl.hp.com/2003/04/vocabgen#> .

  [] a vocab:Config ;
     vocab:input <file:people.ttl> ;
     vocab:ontology true ;
     vocab:include <http://michaeldebellis.com/people/> .

A value given on the command line always wins over the configuration document.
"""

import argparse
from enum import Enum
from pathlib import Path
from typing import List, NamedTuple, Optional

from rdflib import BNode, Graph, Literal, Namespace, URIRef, RDF
from rdflib.util import guess_format

# --------------------
# Settings
# --------------------
NS = "http://jena.hpl.hp.com/2003/04/vocabgen#"
VOCAB = Namespace(NS)

DEFAULT_CONFIG = "vocab.rdf"


class ConfigurationError(Exception):
    """A fatal problem with the options, the configuration or the input document."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class OptionKind(Enum):
    FLAG = "flag"
    VALUE = "value"
    MULTI = "multi"


class OptionDefinition(NamedTuple):
    flag: str
    prop: Optional[str]
    kind: OptionKind
    help: str


class OptionKey(Enum):
    CONFIG_FILE = OptionDefinition("-c", None, OptionKind.VALUE, "Path of the RDF configuration document")
    ROOT = OptionDefinition("-r", None, OptionKind.VALUE, "URI of the root resource in the configuration document")
    NO_COMMENTS = OptionDefinition("--nocomments", "noComments", OptionKind.FLAG, "Do not write term comments")
    INPUT = OptionDefinition("-i", "input", OptionKind.VALUE, "URL or path of the input vocabulary document")
    LANG_DAML = OptionDefinition("--daml", "daml", OptionKind.FLAG, "The input is DAML+OIL")
    LANG_OWL = OptionDefinition("--owl", "owl", OptionKind.FLAG, "The input is OWL (the default)")
    OUTPUT = OptionDefinition("-o", "output", OptionKind.VALUE, "Output file or directory; stdout if omitted")
    HEADER = OptionDefinition("--header", "header", OptionKind.VALUE, "Template for the file header")
    FOOTER = OptionDefinition("--footer", "footer", OptionKind.VALUE, "Template for the file footer")
    MARKER = OptionDefinition("-m", "marker", OptionKind.VALUE, "Marker around template variables (default '%%')")
    PACKAGE = OptionDefinition("--package", "package", OptionKind.VALUE, "Package name of the generated class")
    ONTOLOGY = OptionDefinition("--ontology", "ontology", OptionKind.FLAG, "Use ontology terms instead of plain RDF")
    CLASSNAME = OptionDefinition("-n", "classname", OptionKind.VALUE, "Name of the generated class")
    CLASSDEC = OptionDefinition("--classdec", "classdec", OptionKind.VALUE, "Extra decoration for the class declaration")
    BASE = OptionDefinition("--base", "base", OptionKind.VALUE, "Base URI of the vocabulary")
    DECLARATIONS = OptionDefinition("--declarations", "declarations", OptionKind.VALUE,
                                    "Extra declarations at the top of the class")
    PROPERTY_SECTION = OptionDefinition("--propSection", "propSection", OptionKind.VALUE,
                                        "Banner written before the properties")
    CLASS_SECTION = OptionDefinition("--classSection", "classSection", OptionKind.VALUE,
                                     "Banner written before the classes")
    INDIVIDUALS_SECTION = OptionDefinition("--individualsSection", "individualsSection", OptionKind.VALUE,
                                           "Banner written before the individuals")
    NO_PROPERTIES = OptionDefinition("--noproperties", "noproperties", OptionKind.FLAG, "Do not write properties")
    NO_CLASSES = OptionDefinition("--noclasses", "noclasses", OptionKind.FLAG, "Do not write classes")
    NO_INDIVIDUALS = OptionDefinition("--noindividuals", "noindividuals", OptionKind.FLAG, "Do not write individuals")
    PROP_TEMPLATE = OptionDefinition("--propTemplate", "propTemplate", OptionKind.VALUE, "Template for properties")
    CLASS_TEMPLATE = OptionDefinition("--classTemplate", "classTemplate", OptionKind.VALUE, "Template for classes")
    INDIVIDUAL_TEMPLATE = OptionDefinition("--individualTemplate", "individualTemplate", OptionKind.VALUE,
                                           "Template for individuals")
    UC_NAMES = OptionDefinition("--uppercase", "uppercase", OptionKind.FLAG, "Map constant names to UPPER_CASE")
    INCLUDE = OptionDefinition("--include", "include", OptionKind.MULTI,
                               "Also accept terms under this URI prefix (repeatable)")
    CLASSNAME_SUFFIX = OptionDefinition("--classnamesuffix", "classnamesuffix", OptionKind.VALUE,
                                        "Suffix added to the derived class name")
    TARGET = OptionDefinition("--target", "target", OptionKind.VALUE, "Target language: python (default) or java")

    @property
    def dest(self) -> str:
        return self.name.lower()


def build_arg_parser() -> argparse.ArgumentParser:
    """One argparse option per OptionKey; anything not given stays None."""
    parser = argparse.ArgumentParser(
        prog="vocabgen",
        description="Generate a source file of constants from an RDF/OWL vocabulary.",
        allow_abbrev=False,
    )
    for key in OptionKey:
        opt = key.value
        if opt.kind is OptionKind.FLAG:
            parser.add_argument(opt.flag, dest=key.dest, action="store_true", default=None, help=opt.help)
        elif opt.kind is OptionKind.MULTI:
            parser.add_argument(opt.flag, dest=key.dest, action="append", default=None,
                                metavar="URI", help=opt.help)
        else:
            parser.add_argument(opt.flag, dest=key.dest, default=None, metavar="VALUE", help=opt.help)
    return parser


# --------------------
# Configuration document
# --------------------
def load_config(location: Optional[str]) -> Graph:
    """
    Read the configuration document. An explicitly named document that cannot
    be read is fatal; a missing or broken default document is ignored.
    """
    g = Graph()
    explicit = location is not None
    location = location if explicit else DEFAULT_CONFIG

    if not explicit and not Path(location).exists():
        return g

    try:
        g.parse(location, format=guess_format(location) or "xml")
    except Exception as e:
        if explicit:
            raise ConfigurationError(f"Failed to read configuration from URI {location}", e)
        return Graph()
    return g


def find_config_root(config: Graph, root_uri: Optional[str] = None):
    """The nominated root, else the (first) vocab:Config, else a fresh blank node."""
    if root_uri:
        return URIRef(root_uri)
    for s in config.subjects(RDF.type, VOCAB.Config):
        return s
    return BNode()


def _is_true_literal(node) -> bool:
    if not isinstance(node, Literal):
        return False
    val = node.toPython()
    if isinstance(val, bool):
        return val
    return str(node).strip().lower() == "true"


# --------------------
# Resolved options
# --------------------
class Options:
    """
    Read-through view over the parsed command line and the configuration graph.

    Nothing is cached or copied: each lookup checks the command line first and
    then the root resource of the configuration document.
    """

    def __init__(self, args: argparse.Namespace, config: Optional[Graph] = None, root=None):
        self.args = args
        self.config = config if config is not None else Graph()
        self.root = root if root is not None else BNode()

    @classmethod
    def from_argv(cls, argv: List[str], config: Optional[Graph] = None, root=None) -> "Options":
        args = build_arg_parser().parse_args(argv)
        return cls(args, config, root)

    def _cmdline(self, key: OptionKey):
        return getattr(self.args, key.dest, None)

    def _config_objects(self, key: OptionKey):
        prop = key.value.prop
        if prop is None:
            return []
        return list(self.config.objects(self.root, VOCAB[prop]))

    def is_true(self, key: OptionKey) -> bool:
        if self._cmdline(key):
            return True
        objs = self._config_objects(key)
        return bool(objs) and _is_true_literal(objs[0])

    def value(self, key: OptionKey) -> Optional[str]:
        cmd = self._cmdline(key)
        if isinstance(cmd, list):
            cmd = cmd[0] if cmd else None
        if cmd is not None and not isinstance(cmd, bool):
            return cmd
        objs = self._config_objects(key)
        if objs:
            return str(objs[0])
        return None

    def has_value(self, key: OptionKey) -> bool:
        return self.value(key) is not None

    def resource_value(self, key: OptionKey) -> Optional[URIRef]:
        val = self.value(key)
        return URIRef(val) if val is not None else None

    def has_resource_value(self, key: OptionKey) -> bool:
        return self.resource_value(key) is not None

    def all_values(self, key: OptionKey) -> List[str]:
        values = []
        cmd = self._cmdline(key)
        if isinstance(cmd, list):
            values.extend(cmd)
        elif cmd is not None and not isinstance(cmd, bool):
            values.append(cmd)
        values.extend(str(o) for o in self._config_objects(key))
        return values
