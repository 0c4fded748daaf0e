"""gitlanes Core Library.

Lays out a repository's commit history as a lane graph for character-cell
terminals.

Execution Context:
    Library package - imported by the CLI and the TUI client

Dependencies:
    - GitPython: Repository access (commit source only)

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

from gitlanes_core.graph import GraphBuilder
from gitlanes_core.graph import build_graph
from gitlanes_core.graph import graph_width
from gitlanes_core.models import CommitDescriptor
from gitlanes_core.models import CommitNode
from gitlanes_core.models import ConnectionRow
from gitlanes_core.models import EdgeType
from gitlanes_core.models import GraphCell
from gitlanes_core.models import GraphRow

__version__ = "0.1.0"

__all__ = [
    "CommitDescriptor",
    "CommitNode",
    "ConnectionRow",
    "EdgeType",
    "GraphBuilder",
    "GraphCell",
    "GraphRow",
    "build_graph",
    "graph_width",
    "__version__",
]
