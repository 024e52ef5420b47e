"""statecanvas: draw finite-state automata and export them as TikZ."""

__version__ = "0.1.0"
