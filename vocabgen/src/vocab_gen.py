#!/usr/bin/env python3
"""
Generate a source file of constants from an RDF, RDFS, OWL or DAML+OIL vocabulary.

One constant is written per property, class and individual of the vocabulary,
plus the namespace of the vocabulary itself. The layout of every declaration
is a template, and every option may come from the command line or from an RDF
configuration document (see vocab_options.py).

Usage:
  python vocab_gen.py -i people.ttl --ontology
  python vocab_gen.py -i people.ttl --target java --package org.example -o src/main/java/org/example/
  python vocab_gen.py -c vocab.ttl -r http://example.org/config#people

Template variables:
  %date% %package% %imports% %classname% %sourceURI% %nl%       (everywhere)
  %valuri% %valname% %valclass% %valcreator% %valtype%          (declarations)
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from vocab_comments import INDENT_STEP, format_comment
from vocab_dialects import get_dialect
from vocab_names import IdentifierGrammar, NameAllocator, as_legal_identifier
from vocab_options import (
    ConfigurationError, OptionKey, Options, build_arg_parser, find_config_root, load_config,
)
from vocab_source import DAML_PROFILE, OWL_PROFILE, load_source
from vocab_templates import TemplateEngine
from vocab_terms import (
    Candidate, TermFilter, class_candidates, individual_candidates, property_candidates,
)

# --------------------
# Settings
# --------------------
DATE_FORMAT = "%d %b %Y %H:%M"

# Stripped from the input URI, in this order, when deriving the class name
SOURCE_EXTENSIONS = (".daml", ".owl", ".rdf", ".rdfs", ".n3", ".ttl", ".nt")


def derive_class_name(uri: str, grammar: IdentifierGrammar, suffix: Optional[str] = None) -> Optional[str]:
    """people.owl -> People, http://ex.org/my-vocab# -> My_vocab"""
    if uri.endswith("#"):
        uri = uri[:-1]
    for ext in SOURCE_EXTENSIONS:
        if uri.endswith(ext):
            uri = uri[:-len(ext)]

    # back up to the last character that cannot be part of a name
    i = len(uri)
    while i > 0 and (grammar.is_part(uri[i - 1]) or uri[i - 1] == "-"):
        i -= 1
    name = uri[i:]

    if suffix:
        name += suffix
    return as_legal_identifier(name, grammar, capitalize=True)


class VocabGenerator:
    """
    One generation run. All state (options, include list, names issued so far,
    template bindings) belongs to the instance, so runs never share anything.
    """

    def __init__(self, argv: List[str], stdout=None):
        self.argv = list(argv)
        self.stdout = stdout if stdout is not None else sys.stdout

        self.options: Optional[Options] = None
        self.profile = OWL_PROFILE
        self.dialect = None
        self.source = None
        self.engine: Optional[TemplateEngine] = None
        self.names: Optional[NameAllocator] = None
        self.term_filter: Optional[TermFilter] = None

        self.output = None
        self.output_path: Optional[Path] = None

    # --------------------
    # Main sequence
    # --------------------
    def run(self):
        args = build_arg_parser().parse_args(self.argv)
        self.options = Options(args, load_config(args.config_file))

        try:
            self.determine_config_root()
            self.determine_language()
            self.select_input()
            self.select_output()
            self.set_global_replacements()

            self.process_header()
            self.write_class_declaration()
            self.write_initial_declarations()
            self.write_properties()
            self.write_classes()
            self.write_individuals()
            self.write_class_close()
            self.process_footer()
        finally:
            self.close_output()

        if self.output_path is not None:
            print(f"Wrote: {self.output_path}", file=sys.stderr)

    def determine_config_root(self):
        opts = self.options
        opts.root = find_config_root(opts.config, opts.value(OptionKey.ROOT))

        self.engine = TemplateEngine(opts.value(OptionKey.MARKER))

    def determine_language(self):
        opts = self.options
        self.profile = DAML_PROFILE if opts.is_true(OptionKey.LANG_DAML) else OWL_PROFILE
        try:
            self.dialect = get_dialect(opts.value(OptionKey.TARGET))
        except ValueError as e:
            raise ConfigurationError(str(e))

        self.names = NameAllocator(self.dialect.grammar, uppercase=opts.is_true(OptionKey.UC_NAMES),
                                   used_names=set(self.dialect.reserved_names))
        # extra namespaces that pass the filter
        self.term_filter = TermFilter(self.names, opts.all_values(OptionKey.INCLUDE))

    def select_input(self):
        if not self.options.has_resource_value(OptionKey.INPUT):
            raise ConfigurationError("No input document URL specified.")
        self.source = load_source(str(self.options.resource_value(OptionKey.INPUT)), self.profile)

    def select_output(self):
        out = self.options.value(OptionKey.OUTPUT)
        if out is None:
            self.output = self.stdout
            return

        path = Path(out)
        if path.is_dir():
            path = path / (self.class_name() + self.dialect.extension)
        try:
            self.output = open(path, "w", encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"I/O error while trying to open file for writing: {out}", e)
        self.output_path = path

    def set_global_replacements(self):
        opts = self.options
        engine = self.engine
        engine.push("date", datetime.now().strftime(DATE_FORMAT))
        engine.push("package", opts.value(OptionKey.PACKAGE))
        engine.push("imports", self.dialect.imports(self.use_ontology(), self.profile))
        engine.push("classname", self.class_name())
        engine.push("sourceURI", str(opts.resource_value(OptionKey.INPUT)))
        engine.push("nl", "\n")

    def close_output(self):
        if self.output is None:
            return
        self.output.flush()
        if self.output is not self.stdout:
            self.output.close()

    # --------------------
    # Helpers
    # --------------------
    def use_ontology(self) -> bool:
        return self.options.is_true(OptionKey.ONTOLOGY)

    def class_name(self) -> str:
        opts = self.options
        if opts.has_value(OptionKey.CLASSNAME):
            return opts.value(OptionKey.CLASSNAME)

        uri = str(opts.resource_value(OptionKey.INPUT))
        name = derive_class_name(uri, self.dialect.grammar, opts.value(OptionKey.CLASSNAME_SUFFIX))
        if name is None:
            raise ConfigurationError(f"Could not derive a class name from {uri}; use -n to name the class")
        return name

    def write(self, indent: int, s: str):
        self.output.write(" " * (INDENT_STEP * indent) + s)

    def writeln(self, indent: int = 0, s: str = ""):
        if s:
            self.write(indent, s)
        self.output.write("\n")

    # --------------------
    # Sections
    # --------------------
    def process_header(self):
        header = self.options.value(OptionKey.HEADER)
        if header is not None:
            self.writeln(0, self.engine.render(header))
            return
        for line in self.dialect.header_lines(self.options.value(OptionKey.PACKAGE), self.use_ontology(),
                                              self.profile):
            self.writeln(0, line)

    def process_footer(self):
        footer = self.options.value(OptionKey.FOOTER)
        if footer is not None:
            self.writeln(0, self.engine.render(footer))

    def write_class_declaration(self):
        self.writeln(0, self.dialect.class_open(self.class_name(), self.options.value(OptionKey.CLASSDEC)))

    def write_class_close(self):
        close = self.dialect.class_close()
        if close is not None:
            self.writeln(0, close)

    def write_initial_declarations(self):
        for line in self.dialect.model_declaration(self.use_ontology(), self.profile):
            self.writeln(1, line)

        for line in self.dialect.namespace_declarations(self.determine_base_uri()):
            self.writeln(1, line)

        declarations = self.options.value(OptionKey.DECLARATIONS)
        if declarations is not None:
            self.writeln(0, self.engine.render(declarations))

    def determine_base_uri(self) -> str:
        """
        The --base option if given. Otherwise the URI of the ontology header,
        '#'-terminated, which is also added to the include list so that the
        vocabulary's own terms pass the filter.
        """
        base = self.options.resource_value(OptionKey.BASE)
        if base is not None:
            return str(base)

        ont = self.source.ontology_uri()
        if ont is None:
            raise ConfigurationError("Could not determine the base URI for the input vocabulary")

        uri = str(ont)
        if not uri.endswith("#"):
            uri += "#"
        self.term_filter.include(uri)
        return uri

    def _section(self, banner_key: OptionKey):
        banner = self.options.value(banner_key)
        if banner is not None:
            self.writeln(0, self.engine.render(banner))

    def _template(self, key: OptionKey, default: str) -> str:
        value = self.options.value(key)
        return value if value is not None else default

    def write_properties(self):
        if self.options.is_true(OptionKey.NO_PROPERTIES):
            return
        self._section(OptionKey.PROPERTY_SECTION)

        default, _, _ = self.dialect.templates(self.use_ontology())
        template = self._template(OptionKey.PROP_TEMPLATE, default)
        for candidate in property_candidates(self.source, self.use_ontology()):
            self.write_value(candidate, template)

    def write_classes(self):
        if self.options.is_true(OptionKey.NO_CLASSES):
            return
        self._section(OptionKey.CLASS_SECTION)

        _, default, _ = self.dialect.templates(self.use_ontology())
        template = self._template(OptionKey.CLASS_TEMPLATE, default)
        for candidate in class_candidates(self.source, self.use_ontology()):
            self.write_value(candidate, template)

    def write_individuals(self):
        if self.options.is_true(OptionKey.NO_INDIVIDUALS):
            return
        self._section(OptionKey.INDIVIDUALS_SECTION)

        _, _, default = self.dialect.templates(self.use_ontology())
        template = self._template(OptionKey.INDIVIDUAL_TEMPLATE, default)
        for candidate in individual_candidates(self.source, self.term_filter):
            if not self.use_ontology():
                self.write_value(candidate, template)
                continue

            # a class written earlier is referred to by its constant
            class_uri = candidate.rdf_type
            valtype = self.names.name_for(class_uri) or self.dialect.class_constructor(str(class_uri))
            with self.engine.scope(valtype=valtype):
                self.write_value(candidate, template)

    def write_value(self, candidate: Candidate, template: str):
        node = candidate.node
        if not self.term_filter.accepts(node):
            return

        name = self.names.allocate(node, candidate.category.suffix)
        if name is None:
            return

        if not self.options.is_true(OptionKey.NO_COMMENTS):
            comment = self.source.comment_for(node)
            if comment:
                self.writeln(1, format_comment(comment, self.dialect.comment_style, indent=1))

        valclass, valcreator = self.dialect.value_kind(candidate.category, self.use_ontology(),
                                                       candidate.rdf_type)
        with self.engine.scope(valuri=str(node), valname=name, valclass=valclass, valcreator=valcreator):
            self.writeln(1, self.engine.render(template))
        self.writeln()


# --------------------
# Main
# --------------------
def main_cli(argv: Optional[List[str]] = None):
    argv = sys.argv[1:] if argv is None else argv
    try:
        VocabGenerator(argv).run()
    except ConfigurationError as e:
        print(e.message, file=sys.stderr)
        if e.cause is not None:
            print(e.cause, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main_cli()
