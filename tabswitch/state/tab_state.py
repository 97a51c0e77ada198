"""
Selection state for a single tab group.

TabState keeps two independent ledgers (tabs and panels) and the currently
active tab token. Tabs and panels announce themselves through register_tab and
register_panel; the presentation layer asks is_active_tab / is_active_panel on
every render and calls set_active_tab when the user picks a tab.

Panels are matched to tabs by position by default: the Nth registered tab
governs the Nth registered panel. Nothing checks that tabs and panels were
declared in the same relative order. If they were not, the wrong panel is
shown without any error.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from loguru import logger

from ..config import get_setting
from .tab_identity import Token, as_token
from .tab_ledger import TokenLedger


PANEL_MATCHING_POSITION = "position"
PANEL_MATCHING_TOKEN = "token"
PANEL_MATCHING_MODES = (PANEL_MATCHING_POSITION, PANEL_MATCHING_TOKEN)

CHANGE_SELECTED = "selected"
CHANGE_TAB_REGISTERED = "tab_registered"
CHANGE_PANEL_REGISTERED = "panel_registered"


class TabStateError(Exception):
    """Base class for tab state misuse."""


class UnavailableTokenError(TabStateError):
    """Raised when an unresolved (None or empty) token is registered or selected."""


class InvalidPanelMatchingError(TabStateError):
    """Raised for an unknown panel matching mode."""


@dataclass(frozen=True)
class TabStateChange:
    """Describes one mutation of a TabState, delivered to subscribers."""

    kind: str
    token: Token
    previous_active: Optional[Token] = None


StateListener = Callable[[TabStateChange], None]


class TabState:
    """
    Registration and selection controller for one group of tabs.

    Construct one instance per tab group and hand it to every tab and panel of
    that group. Groups never share an instance.
    """

    def __init__(self, default_active_tab: Any = None, *, panel_matching: Optional[str] = None):
        if panel_matching is None:
            panel_matching = get_setting("tabs", "panel_matching", PANEL_MATCHING_POSITION)
            if panel_matching not in PANEL_MATCHING_MODES:
                logger.warning(
                    f"Ignoring unknown [tabs] panel_matching {panel_matching!r} in config; using position"
                )
                panel_matching = PANEL_MATCHING_POSITION
        elif panel_matching not in PANEL_MATCHING_MODES:
            raise InvalidPanelMatchingError(
                f"Unknown panel matching mode {panel_matching!r}; expected one of {PANEL_MATCHING_MODES}"
            )
        self.panel_matching: str = panel_matching
        self._tabs = TokenLedger("tabs")
        self._panels = TokenLedger("panels")
        # None means Unset
        self._active: Optional[Token] = as_token(default_active_tab)
        self._listeners: List[StateListener] = []
        logger.debug(f"TabState created (default={self._active!r}, panel_matching={self.panel_matching})")

    # --- Registration ---

    def register_tab(self, token: Any) -> None:
        """Record a tab; the first tab seen while nothing is active becomes active."""
        resolved = self._require(token, "register_tab")
        if not self._tabs.add(resolved):
            return
        logger.debug(f"Registered tab {resolved!r} at position {len(self._tabs) - 1}")
        if self._active is None:
            self._active = resolved
            logger.debug(f"Activated first registered tab {resolved!r}")
            self._notify(TabStateChange(CHANGE_SELECTED, resolved, None))
        self._notify(TabStateChange(CHANGE_TAB_REGISTERED, resolved, None))

    def register_panel(self, token: Any) -> None:
        """Record a panel."""
        resolved = self._require(token, "register_panel")
        if not self._panels.add(resolved):
            return
        logger.debug(f"Registered panel {resolved!r} at position {len(self._panels) - 1}")
        self._notify(TabStateChange(CHANGE_PANEL_REGISTERED, resolved, None))

    # --- Selection ---

    def set_active_tab(self, token: Any) -> None:
        """
        Make a tab active.

        Tokens that have not registered (yet) are accepted; they simply match
        no tab until a tab with that token registers.
        """
        resolved = self._require(token, "set_active_tab")
        if resolved == self._active:
            return
        previous = self._active
        self._active = resolved
        if resolved not in self._tabs:
            logger.debug(f"Selected tab {resolved!r} which is not registered")
        else:
            logger.debug(f"Selected tab {resolved!r}")
        self._notify(TabStateChange(CHANGE_SELECTED, resolved, previous))

    @property
    def active_tab(self) -> Optional[Token]:
        return self._active

    @property
    def has_selection(self) -> bool:
        return self._active is not None

    @property
    def active_index(self) -> int:
        """Position of the active tab in the tab ledger, or -1."""
        if self._active is None:
            return -1
        return self._tabs.index_of(self._active)

    # --- Queries ---

    def is_active_tab(self, token: Any) -> bool:
        resolved = as_token(token)
        if resolved is None or self._active is None:
            return False
        return resolved == self._active

    def is_active_panel(self, token: Any) -> bool:
        """
        Check whether a panel should be visible.

        In position mode the panel is active when its registration index equals
        the active tab's registration index. In token mode it is active when its
        token equals the active token. Anything not found is simply inactive.
        """
        resolved = as_token(token)
        if resolved is None or self._active is None:
            return False
        if self.panel_matching == PANEL_MATCHING_TOKEN:
            return resolved == self._active

        tab_index = self._tabs.index_of(self._active)
        panel_index = self._panels.index_of(resolved)
        if tab_index < 0 or panel_index < 0:
            return False
        return tab_index == panel_index

    @property
    def tab_tokens(self) -> Tuple[Token, ...]:
        return self._tabs.tokens

    @property
    def panel_tokens(self) -> Tuple[Token, ...]:
        return self._panels.tokens

    # --- Subscriptions ---

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called after every change.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, change: TabStateChange) -> None:
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                logger.exception(f"TabState listener {listener!r} failed on {change.kind}")

    def _require(self, token: Any, operation: str) -> Token:
        resolved = as_token(token)
        if resolved is None:
            raise UnavailableTokenError(f"{operation} needs a resolved token, got {token!r}")
        return resolved

    def __repr__(self) -> str:
        return (
            f"TabState(active={self._active!r}, tabs={len(self._tabs)}, "
            f"panels={len(self._panels)}, panel_matching={self.panel_matching!r})"
        )
