"""histchain CLI Application.

Command-line interface for building and rewriting a linear commit history.

Execution Context:
    CLI application - invoked from terminal

Dependencies:
    - click: CLI framework
    - rich: Terminal formatting
    - histchain_core: Core library

Metadata:
    Version: 0.1.0
    Author: histchain Team
"""
from __future__ import annotations

__version__ = "0.1.0"
