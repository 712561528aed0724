"""Building blocks for a minimal command shell: environment, line expansion, command lookup and text helpers."""

__version__ = "0.1.0"