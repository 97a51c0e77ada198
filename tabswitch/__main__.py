"""Main entry point for running the demo as a module.

This allows running with: python -m tabswitch
"""

from .demo_app import main

if __name__ == "__main__":
    main()
