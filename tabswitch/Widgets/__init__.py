"""Textual widgets for tabswitch."""

from .tab_widgets import TabButton, TabGroup, TabList, TabPanel

__all__ = ['TabButton', 'TabGroup', 'TabList', 'TabPanel']
