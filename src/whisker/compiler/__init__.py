"""Compiler — turn one content source file into the module the host serves."""

from whisker.compiler.loader import LoaderContext, compile_source, compile_source_sync
from whisker.compiler.page import generate_page_module, resolve_layout, resolve_layout_config

__all__ = [
    "LoaderContext",
    "compile_source",
    "compile_source_sync",
    "generate_page_module",
    "resolve_layout",
    "resolve_layout_config",
]
