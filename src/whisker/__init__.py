"""Whisker — a locale-aware page map compiler.

Turns a directory of content files into a route tree (the *page map*) and
compiles each file into a module that renders it through the site layout.
Pages published in several locales (``intro.en.mdx``, ``intro.fr.mdx``)
compile into a dispatcher that picks the variant for the active locale.

Quick start::

    import whisker

    result = whisker.build_page_map_sync("pages/")
    french = whisker.filter_locale(result.tree, "fr", "en")

Per-file compilation (what a build pipeline calls)::

    from whisker import LoaderContext, WhiskerConfig, compile_source

    module = await compile_source(source, LoaderContext(path), config)

"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "LoaderContext",
    "WhiskerConfig",
    "__version__",
    "build_page_map",
    "build_page_map_sync",
    "compile_source",
    "filter_locale",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import whisker`` fast; the YAML, markdown and watcher stacks are
    only imported when first used.
    """
    if name == "WhiskerConfig":
        from whisker.config import WhiskerConfig

        return WhiskerConfig

    if name in ("build_page_map", "build_page_map_sync"):
        from whisker.content import tree

        return getattr(tree, name)

    if name == "filter_locale":
        from whisker.content.locale_filter import filter_locale

        return filter_locale

    if name in ("compile_source", "LoaderContext"):
        from whisker.compiler import loader

        return getattr(loader, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
