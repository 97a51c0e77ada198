"""Example application showing two independent tab groups."""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static
from loguru import logger

from .state.tab_state import TabState
from .Utils.logging_config import configure_logging
from .Widgets.tab_widgets import TabButton, TabGroup, TabList, TabPanel


class TabsDemoApp(App):
    """Two tab groups: one with explicit tab ids, one relying on widget identity."""

    CSS = """
    TabGroup {
        border: round $primary;
        margin: 1 2;
    }
    """

    TITLE = "tabswitch demo"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Each group gets its own state; the same object goes to every tab and panel
        self.named_state = TabState("tab1")
        self.anonymous_state = TabState()

    def compose(self) -> ComposeResult:
        yield Header()
        with TabGroup(state=self.named_state, id="named-tabs"):
            with TabList():
                yield TabButton("tab1", state=self.named_state, tab_id="tab1", id="named-tab-1")
                yield TabButton("tab2", state=self.named_state, tab_id="tab2", id="named-tab-2")
            yield TabPanel(Static("content1"), state=self.named_state, tab_id="tab1", id="named-panel-1")
            yield TabPanel(Static("content2"), state=self.named_state, tab_id="tab2", id="named-panel-2")
        with TabGroup(state=self.anonymous_state, id="anonymous-tabs"):
            with TabList():
                yield TabButton("First", state=self.anonymous_state, id="anonymous-tab-1")
                yield TabButton("Second", state=self.anonymous_state, id="anonymous-tab-2")
                yield TabButton("Third", state=self.anonymous_state, id="anonymous-tab-3")
            yield TabPanel(Static("First panel"), state=self.anonymous_state, id="anonymous-panel-1")
            yield TabPanel(Static("Second panel"), state=self.anonymous_state, id="anonymous-panel-2")
            yield TabPanel(Static("Third panel"), state=self.anonymous_state, id="anonymous-panel-3")
        yield Footer()

    def on_tab_button_selected(self, message: TabButton.Selected) -> None:
        logger.info(f"Selected tab {message.token!r}")
        self.sub_title = f"Active: {message.tab.label}"


def main():
    """Run the demo application."""
    configure_logging()
    app = TabsDemoApp()
    app.run()


if __name__ == "__main__":
    main()
