# Author:   LemonScript developers
# Date:     10/19/2026

from copy import deepcopy
from dataclasses import dataclass
from typing import List, Optional

from lark import Tree


# a name and the unevaluated expression it stands for
@dataclass
class Binding:
    name: str
    expr: Tree


# Name environment
#
class Env():
    def __init__(self):
        # using a dict to map names to bindings
        self.bindings = {}

    # bind a name to its own copy of an expression, replacing any older binding
    def bind(self, name: str, expr: Tree) -> Binding:
        binding = Binding(name, deepcopy(expr))
        self.bindings[name] = binding
        return binding

    # look up the binding held by a name
    def lookup(self, name: str) -> Optional[Binding]:
        return self.bindings.get(name)

    # release every binding
    def clear(self) -> None:
        self.bindings.clear()

    def names(self) -> List[str]:
        return sorted(self.bindings)

    def __len__(self):
        return len(self.bindings)
