"""
impltables - loader and tooling for generated "Implementors" tables.

A documentation build writes one small script per trait listing which crates
implement it. This package reads those artifacts, builds the tables and
delivers each one to a rendering hook (or parks it until a hook shows up).
"""

__version__ = "0.3.0"
