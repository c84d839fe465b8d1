"""
toyc Command-Line Interface
===========================

This package provides command-line tools for the toyc toolchain:

- **tclex**: Toy-C scanner (token dump and lexical error report)

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["tclex"]
