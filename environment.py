"""Variable environments with nested scopes.

`Environment` maps variable names to values and holds an optional link to
the enclosing scope. Lookups that miss locally walk the enclosing chain, so
a block sees the variables of every scope around it while declarations stay
local to the scope that made them.
"""

from __future__ import annotations
from typing import Optional, Dict
from errors import ExecutionError
from values import Value


class Environment:
    def __init__(self, enclosing: Optional[Environment] = None):
        self.values: Dict[str, Value] = {}
        self.enclosing = enclosing

    def define(self, name: str, value: Value) -> None:
        """Bind a name in this scope, replacing any earlier binding here."""
        self.values[name] = value

    def get(self, name: str, line: int = 0) -> Value:
        """Look up a variable in the current and enclosing scopes."""
        if name in self.values:
            return self.values[name]
        elif self.enclosing:
            return self.enclosing.get(name, line)
        else:
            raise ExecutionError(f"Undefined variable '{name}'.", line)
