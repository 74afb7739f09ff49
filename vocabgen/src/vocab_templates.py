"""
vocab_templates.py
------------------

Placeholder substitution for header, footer and declaration templates.

A template refers to a variable as <marker><name><marker>, e.g. %valname%.
Bindings live on a stack and are applied oldest first, so when the same name
is bound twice the older binding is the one that takes effect (it replaces the
placeholder before the newer one sees it).

  engine = TemplateEngine()
  engine.push("classname", "People")
  with engine.scope(valname="hasName", valuri="http://ex.org/v#hasName"):
      engine.render('%valname% = URIRef("%valuri%")')
"""

import re
from contextlib import contextmanager
from typing import List, Optional, Pattern, Tuple

from vocab_options import ConfigurationError

DEFAULT_MARKER = "%"


class TemplateEngine:
    def __init__(self, marker: Optional[str] = None):
        self.marker = marker if marker is not None else DEFAULT_MARKER
        self._bindings: List[Tuple[Pattern, str]] = []

    def __len__(self) -> int:
        return len(self._bindings)

    def push(self, key: Optional[str], value: Optional[str]) -> int:
        """Bind key to value. Answers the number of bindings pushed (0 when either is None)."""
        if key is None or value is None:
            return 0

        source = self.marker + key + self.marker
        try:
            pattern = re.compile(source)
        except re.error as e:
            raise ConfigurationError(f"Malformed regexp pattern {source}", e)

        self._bindings.append((pattern, str(value)))
        return 1

    def pop(self, n: int = 1):
        for _ in range(n):
            self._bindings.pop()

    def render(self, template: str) -> str:
        s = template
        for pattern, replacement in self._bindings:
            s = pattern.sub(lambda _m, r=replacement: r, s)
        return s

    @contextmanager
    def scope(self, **bindings):
        """Push the bindings in the order given; pop exactly those on exit."""
        pushed = 0
        try:
            for key, value in bindings.items():
                pushed += self.push(key, value)
            yield self
        finally:
            self.pop(pushed)
