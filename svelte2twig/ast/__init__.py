"""Node model and loaders for Svelte component ASTs."""

from .loader import build_node, load_component_ast, read_ast_file
from .nodes import ComponentAst, Node, walk
from .parser import ParserError, SvelteAstSource

__all__ = [
    "ComponentAst",
    "Node",
    "ParserError",
    "SvelteAstSource",
    "build_node",
    "load_component_ast",
    "read_ast_file",
    "walk",
]
