"""Supporting utilities for tabswitch."""
