"""
vocab_names.py
--------------

Turns term URIs into identifiers of the target language.

  http://ex.org/v#hasName      -> hasName       (HAS_NAME with uppercase=True)
  http://ex.org/v#has-name     -> has_name
  http://ex.org/v#1stPlace     -> stPlace       (leading illegal chars are skipped)

Every identifier is issued once per run. A clash is resolved with the term's
category suffix: Foo, Foo_PROP, Foo_PROP1, Foo_PROP2, ...
"""

import keyword
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Optional, Set

from rdflib import URIRef
from rdflib.namespace import split_uri


@dataclass(frozen=True)
class IdentifierGrammar:
    name: str
    is_start: Callable[[str], bool]
    is_part: Callable[[str], bool]
    reserved: FrozenSet[str] = frozenset()


def _py_start(c: str) -> bool:
    return c.isidentifier()


def _py_part(c: str) -> bool:
    return ("_" + c).isidentifier()


def _java_start(c: str) -> bool:
    return c.isalpha() or c in "_$"


def _java_part(c: str) -> bool:
    return c.isalnum() or c in "_$"


JAVA_KEYWORDS = frozenset("""
    abstract assert boolean break byte case catch char class const continue default do double
    else enum extends false final finally float for goto if implements import instanceof int
    interface long native new null package private protected public return short static strictfp
    super switch synchronized this throw throws transient true try void volatile while
""".split())

PYTHON_GRAMMAR = IdentifierGrammar("python", _py_start, _py_part, frozenset(keyword.kwlist))
JAVA_GRAMMAR = IdentifierGrammar("java", _java_start, _java_part, JAVA_KEYWORDS)


def local_name(uri) -> str:
    """Fragment or last path segment of the URI ('' if there is none)."""
    try:
        _, local = split_uri(uri)
        return local
    except Exception:
        s = str(uri)
        return s.split('#')[-1] if '#' in s else s.rsplit('/', 1)[-1]


def uppercase_name(name: str) -> str:
    """camelCase -> CAMEL_CASE"""
    out = []
    last = ""
    for c in name:
        if last.islower() and c.isupper():
            out.append("_")
        out.append(c.upper())
        last = c
    return "".join(out)


def as_legal_identifier(s: str, grammar: IdentifierGrammar, capitalize: bool = False) -> Optional[str]:
    """
    Skip leading characters that cannot start an identifier, optionally
    upper-case the first one kept, and replace later illegal characters with
    '_'. Answers None when nothing usable is left.
    """
    i = 0
    while i < len(s) and not grammar.is_start(s[i]):
        i += 1
    if i == len(s):
        return None

    first = s[i].upper() if capitalize else s[i]
    rest = "".join(c if grammar.is_part(c) else "_" for c in s[i + 1:])
    name = first + rest

    if name in grammar.reserved:
        name += "_"
    return name


@dataclass
class NameAllocator:
    grammar: IdentifierGrammar
    uppercase: bool = False
    used_names: Set[str] = field(default_factory=set)
    resource_names: Dict[URIRef, str] = field(default_factory=dict)

    def name_for(self, uri) -> Optional[str]:
        return self.resource_names.get(uri)

    def allocate(self, uri: URIRef, suffix: str) -> Optional[str]:
        """Issue the identifier for uri. A URI that already has one keeps it."""
        if uri in self.resource_names:
            return self.resource_names[uri]

        raw = local_name(uri)
        if self.uppercase:
            raw = uppercase_name(raw)

        name = as_legal_identifier(raw, self.grammar)
        if name is None:
            return None

        base = name
        attempt = 0
        while name in self.used_names:
            name = (name + suffix) if attempt == 0 else f"{base}{suffix}{attempt}"
            attempt += 1

        self.used_names.add(name)
        self.resource_names[uri] = name
        return name
