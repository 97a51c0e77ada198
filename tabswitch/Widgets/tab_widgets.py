# tab_widgets.py
# Description: Textual widgets that render a tab group from a TabState
#
# Imports
from typing import Any, Callable, Optional
#
# 3rd-Party Imports
from loguru import logger
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button
#
# Local Imports
from ..state.tab_identity import Token, resolve_token
from ..state.tab_state import TabState, TabStateChange
#
#######################################################################################################################
#
# Classes:

def _owning_group(widget: Any, state: TabState) -> Optional["TabGroup"]:
    """Nearest TabGroup ancestor that shares the widget's state, if any."""
    for node in widget.ancestors:
        if isinstance(node, TabGroup) and node.state is state:
            return node
    return None


class TabList(Horizontal):
    """Row container for the tab buttons of a group."""

    DEFAULT_CSS = """
    TabList {
        width: 100%;
        height: auto;
    }
    """


class TabButton(Button):
    """
    A selectable tab.

    The tab's identity is its ``tab_id`` when one is given, otherwise the
    widget instance itself. Pressing the tab makes it the active tab of its
    state and posts ``TabButton.Selected``.
    """

    DEFAULT_CSS = """
    TabButton {
        width: auto;
        min-width: 4;
        height: 1;
        border: none;
        background: transparent;
        color: $foreground 70%;
        padding: 0 1;
    }
    TabButton:hover {
        background: $boost;
    }
    TabButton.-selected {
        color: $foreground;
        text-style: bold underline;
    }
    """

    class Selected(Message):
        """Sent when the user selects a tab."""
        def __init__(self, tab: "TabButton", token: Token) -> None:
            super().__init__()
            self.tab = tab
            self.token = token

    def __init__(self, label: Any = None, *, state: TabState, tab_id: Optional[str] = None, **kwargs):
        super().__init__(label, **kwargs)
        self.tab_state = state
        self.tab_id = tab_id
        self._mounted = False
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def token(self) -> Optional[Token]:
        """This tab's token, or None while an id-less tab is not mounted."""
        return resolve_token(self if self._mounted else None, self.tab_id)

    @property
    def is_selected(self) -> bool:
        token = self.token
        return token is not None and self.tab_state.is_active_tab(token)

    def register(self) -> bool:
        """Announce this tab to its state. Returns False if it has no token yet."""
        token = self.token
        if token is None:
            return False
        self.tab_state.register_tab(token)
        self.sync_state()
        return True

    def sync_state(self) -> None:
        self.set_class(self.is_selected, "-selected")

    def on_mount(self) -> None:
        self._mounted = True
        self._unsubscribe = self.tab_state.subscribe(self._handle_state_change)
        group = _owning_group(self, self.tab_state)
        # Tabs composed inside a group are registered by the group in DOM order
        if group is None or group.is_mounted:
            self.register()
        else:
            self.sync_state()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        token = self.token
        if token is None:
            return
        self.tab_state.set_active_tab(token)
        self.post_message(self.Selected(self, token))
        logger.debug(f"Tab {token!r} pressed")

    def _handle_state_change(self, change: TabStateChange) -> None:
        self.sync_state()


class TabPanel(Container):
    """
    Content shown while its tab is active.

    By default a panel belongs to the tab registered at the same position as
    the panel, so panels must be declared in the same order as their tabs.
    """

    DEFAULT_CSS = """
    TabPanel {
        height: auto;
        padding: 1 0;
    }
    """

    def __init__(self, *children, state: TabState, tab_id: Optional[str] = None, **kwargs):
        super().__init__(*children, **kwargs)
        self.tab_state = state
        self.tab_id = tab_id
        self._mounted = False
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def token(self) -> Optional[Token]:
        return resolve_token(self if self._mounted else None, self.tab_id)

    @property
    def is_visible_panel(self) -> bool:
        token = self.token
        return token is not None and self.tab_state.is_active_panel(token)

    def register(self) -> bool:
        token = self.token
        if token is None:
            return False
        self.tab_state.register_panel(token)
        self.sync_state()
        return True

    def sync_state(self) -> None:
        self.display = self.is_visible_panel

    def on_mount(self) -> None:
        self._mounted = True
        self._unsubscribe = self.tab_state.subscribe(self._handle_state_change)
        group = _owning_group(self, self.tab_state)
        if group is None or group.is_mounted:
            self.register()
        else:
            self.sync_state()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _handle_state_change(self, change: TabStateChange) -> None:
        self.sync_state()


class TabGroup(Vertical):
    """
    Container for one tab group.

    The group owns (or is handed) the TabState shared by its tabs and panels;
    the same state object must also be passed to each TabButton and TabPanel.
    default_active_tab and panel_matching only apply when the group creates the
    state itself.
    Tabs and panels composed inside the group are registered once the whole
    group has mounted, walking the DOM in order, so a panel with deep content
    cannot register ahead of a shallower sibling.
    """

    DEFAULT_CSS = """
    TabGroup {
        height: auto;
    }
    """

    def __init__(
        self,
        *children,
        default_active_tab: Any = None,
        state: Optional[TabState] = None,
        panel_matching: Optional[str] = None,
        **kwargs
    ):
        super().__init__(*children, **kwargs)
        if state is None:
            state = TabState(default_active_tab, panel_matching=panel_matching)
        elif default_active_tab is not None or panel_matching is not None:
            logger.warning(
                "TabGroup given an explicit state; ignoring default_active_tab and panel_matching"
            )
        self.state = state

    @property
    def active_tab(self) -> Optional[Token]:
        return self.state.active_tab

    def on_mount(self) -> None:
        tabs = [tab for tab in self.query(TabButton) if tab.tab_state is self.state]
        panels = [panel for panel in self.query(TabPanel) if panel.tab_state is self.state]
        for tab in tabs:
            tab.register()
        for panel in panels:
            panel.register()
        logger.debug(f"TabGroup {self.id or ''} registered {len(tabs)} tabs and {len(panels)} panels")


# Compound-style aliases: TabGroup.List, TabGroup.Tab, TabGroup.Panel
TabGroup.List = TabList
TabGroup.Tab = TabButton
TabGroup.Panel = TabPanel

#
# End of tab_widgets.py
#######################################################################################################################
