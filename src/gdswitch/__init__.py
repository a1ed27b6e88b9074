"""gdswitch: switch GNOME display arrangements through gdctl."""

__version__ = "0.3.0"
