"""gitlanes CLI Application.

Command-line interface drawing git commit history as a lane graph.

Execution Context:
    CLI application - invoked from terminal

Dependencies:
    - click: CLI framework
    - rich: Terminal formatting
    - gitlanes_core: Core library

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

__version__ = "0.1.0"
