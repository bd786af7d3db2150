"""
Scope management for jdecl semantic analysis.

A single flat scope maps each declared name to its declared type. One is
created per analysis and dropped when the analysis returns.

Author: xwest
"""

from typing import Dict, Iterator, Optional, Tuple


class Scope:
    """Flat name -> declared type mapping for one analysis run."""

    def __init__(self):
        self._symbols: Dict[str, str] = {}

    def define(self, name: str, type_name: str):
        """
        Record a declaration.

        Raises:
            KeyError: If name is already defined
        """
        if name in self._symbols:
            raise KeyError(name)
        self._symbols[name] = type_name

    def lookup(self, name: str) -> Optional[str]:
        return self._symbols.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._symbols.items())
