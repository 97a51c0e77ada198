"""
tabswitch - Tab groups for Textual applications

A small selection-state controller for tab groups (which tab is active, which
panel is visible) plus Textual widgets that render a group from it.
"""

__version__ = "0.1.0"

from .state import (
    ExplicitId,
    InstanceIdentity,
    TabState,
    TabStateChange,
    TabStateError,
    UnavailableTokenError,
    InvalidPanelMatchingError,
    resolve_token,
)

__all__ = [
    "__version__",
    "ExplicitId",
    "InstanceIdentity",
    "TabState",
    "TabStateChange",
    "TabStateError",
    "UnavailableTokenError",
    "InvalidPanelMatchingError",
    "resolve_token",
]
