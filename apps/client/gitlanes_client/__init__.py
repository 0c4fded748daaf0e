"""gitlanes TUI Client.

Interactive terminal view of the commit lane graph.

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

__version__ = "0.1.0"
