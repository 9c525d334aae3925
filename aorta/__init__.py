"""Building blocks of a command shell: built-ins, history, aliases, completion and highlighting."""

__version__ = "0.1.0"