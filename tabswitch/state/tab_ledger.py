"""
Insertion-ordered, duplicate-free registry of tab or panel tokens.
"""

from typing import Iterator, List, Set, Tuple

from .tab_identity import Token


class TokenLedger:
    """Ordered record of the tokens that have registered with a tab group."""

    def __init__(self, name: str = "ledger") -> None:
        self.name = name
        self._tokens: List[Token] = []
        self._seen: Set[Token] = set()

    def add(self, token: Token) -> bool:
        """
        Append a token unless it is already present.

        Returns:
            True if the ledger grew, False for a repeated registration
        """
        if token in self._seen:
            return False
        self._seen.add(token)
        self._tokens.append(token)
        return True

    def index_of(self, token: Token) -> int:
        """Position of the token in registration order, or -1 if absent."""
        if token not in self._seen:
            return -1
        return self._tokens.index(token)

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return tuple(self._tokens)

    def __contains__(self, token: object) -> bool:
        try:
            return token in self._seen
        except TypeError:
            # Unhashable values can never have been registered
            return False

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(tuple(self._tokens))

    def __repr__(self) -> str:
        return f"TokenLedger({self.name!r}, {list(self._tokens)!r})"
