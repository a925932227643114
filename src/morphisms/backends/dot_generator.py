"""
Graphviz DOT diagram generator for compositions.

Converts a (possibly nested) composition into Graphviz DOT format.

Supports two modes:
    - SIMPLE: One node per morphism, edges in call order
    - TYPED: Nodes are types (objects), edges are morphisms (arrows)
"""

from enum import Enum
from typing import List, Optional

from morphisms.identity import identity
from morphisms.composition import Morphism, flatten, morphism_name, signature_of


class DotMode(Enum):
    """Visualization modes for DOT output."""
    SIMPLE = "simple"  # morphisms as nodes
    TYPED = "typed"    # types as nodes, morphisms as labelled arrows


def _escape_dot_string(s: str) -> str:
    """Escape special characters for DOT labels."""
    if not s:
        return '""'
    s = s.replace('\\', '\\\\')
    s = s.replace('"', '\\"')
    s = s.replace('\n', '\\n')
    return f'"{s}"'


def _type_label(t: Optional[type]) -> str:
    if t is None:
        return "?"
    return t.__name__


def generate_dot(morphism: Morphism, mode: DotMode = DotMode.SIMPLE) -> str:
    """
    Generate Graphviz DOT format for a composition.

    Args:
        morphism: Plain or composed morphism to visualize
        mode: Visualization mode (SIMPLE, TYPED)

    Returns:
        String containing DOT graph definition
    """
    chain = flatten(morphism)
    lines: List[str] = []

    lines.append("digraph composition {")
    lines.append("  rankdir=LR;")

    if mode == DotMode.SIMPLE:
        lines.append("  node [shape=box, style=filled, fillcolor=lightblue];")
        lines.append('  START [shape=ellipse, fillcolor=lightgreen, label="START"];')
        lines.append('  END [shape=ellipse, fillcolor=lightgreen, label="END"];')

        previous = "START"
        for i, fn in enumerate(chain):
            node_id = f"m{i}"
            lines.append(f"  {node_id} [label={_escape_dot_string(morphism_name(fn))}];")
            lines.append(f"  {previous} -> {node_id};")
            previous = node_id
        lines.append(f"  {previous} -> END;")

    elif mode == DotMode.TYPED:
        lines.append("  node [shape=circle];")

        # Object i sits between morphism i-1 and morphism i
        current, _ = signature_of(morphism)
        lines.append(f"  o0 [label={_escape_dot_string(_type_label(current))}];")
        for i, fn in enumerate(chain, 1):
            # identity keeps whatever type came in
            if fn is not identity:
                _, current = signature_of(fn)
            lines.append(f"  o{i} [label={_escape_dot_string(_type_label(current))}];")
            label = _escape_dot_string(morphism_name(fn))
            lines.append(f"  o{i - 1} -> o{i} [label={label}];")

    lines.append("}")

    return "\n".join(lines)


__all__ = ["DotMode", "generate_dot"]
