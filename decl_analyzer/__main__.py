#!/usr/bin/env python3
"""
decl-analyzer CLI - Entry point for the declaration analyzer.

This module allows running the analyzer as:
    python -m decl_analyzer program.java
    decl-analyzer program.java  (when installed via pip)
"""

from decl_analyzer.cli import main

if __name__ == "__main__":
    main()
