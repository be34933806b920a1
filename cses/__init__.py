"""Solutions to introductory CSES Problem Set tasks, with input helpers and commands."""

__version__ = "0.1.0"