"""
Tree Serialization — Load ESTree JSON from text or files.
"""

import json
from pathlib import Path
from typing import Union

from domnest.tree.estree import from_estree
from domnest.tree.nodes import SyntaxNode


def loads_tree(json_str: str) -> SyntaxNode:
    """
    Parse ESTree JSON text into a SyntaxNode tree.

    Raises:
        ValueError: If the text is not JSON, is nested too deeply for the
            JSON decoder, or is not an ESTree node
    """
    try:
        data = json.loads(json_str)
    except RecursionError:
        raise ValueError("ESTree JSON is nested too deeply to decode") from None
    return from_estree(data)


def load_tree(path: Union[str, Path]) -> SyntaxNode:
    """Load an ESTree JSON file into a SyntaxNode tree."""
    path = Path(path)
    return loads_tree(path.read_text(encoding="utf-8"))
