"""
Minilex Command-Line Interface
==============================

- **mlscan**: scan a source file and list its tokens

The tool is a Click-based CLI application with help and error reporting.
"""

__all__ = ["mlscan"]
