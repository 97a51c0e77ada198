"""
Tab group state: identity tokens, registration ledgers and the selection controller.
"""

from .tab_identity import ExplicitId, InstanceIdentity, Token, as_token, resolve_token
from .tab_ledger import TokenLedger
from .tab_state import (
    InvalidPanelMatchingError,
    PANEL_MATCHING_POSITION,
    PANEL_MATCHING_TOKEN,
    TabState,
    TabStateChange,
    TabStateError,
    UnavailableTokenError,
)

__all__ = [
    'ExplicitId',
    'InstanceIdentity',
    'Token',
    'as_token',
    'resolve_token',
    'TokenLedger',
    'TabState',
    'TabStateChange',
    'TabStateError',
    'UnavailableTokenError',
    'InvalidPanelMatchingError',
    'PANEL_MATCHING_POSITION',
    'PANEL_MATCHING_TOKEN',
]
