"""prefsdoc - generate the preferences reference page from the preferences pane."""

__version__ = "1.0.0"
