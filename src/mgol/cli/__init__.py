"""
MGOL Command-Line Interface
===========================

- **mgolex**: tokenize an MGOL source file

Implemented with Click.
"""

__all__ = ["mgolex"]
