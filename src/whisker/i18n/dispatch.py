"""Locale dispatch code generation.

Produces the module served for a page that exists in several locales.  The
module imports every variant through the raw query (so the import does not
dispatch again), renders the variant matching the router's locale, and falls
back to the default variant.  Output for ``intro.en.mdx`` / ``intro.fr.mdx``
where only the English page fetches data::

    import { useRouter } from 'next/router'
    import Page_0, { getStaticProps as page_data_0 } from './intro.en.mdx?whisker-raw'
    import Page_1 from './intro.fr.mdx?whisker-raw'

    export default function LocalizedPage (props) {
      const { locale } = useRouter()
      if (locale === "en") {
        return <Page_0 {...props}/>
      }
      if (locale === "fr") {
        return <Page_1 {...props}/>
      }
      return <Page_0 {...props}/>
    }

    export async function getStaticProps (context) {
      const locale = context.locale
      if (locale === "en") {
        return page_data_0(context)
      }
      if (locale === "fr") {
        return { props: {} }
      }
      return page_data_0(context)
    }

"""

from __future__ import annotations

import json

from whisker._errors import ContentError
from whisker.i18n.analyzer import SERVER_FETCH, STATIC_FETCH, DispatchDescriptor, LocaleVariant

_EMPTY_PROPS = "return { props: {} }"


def _variant_fetch(variant: LocaleVariant) -> str | None:
    """The fetch function imported from a variant; static wins over server."""
    if variant.has_static_fetch:
        return STATIC_FETCH
    if variant.has_server_fetch:
        return SERVER_FETCH
    return None


def _group_fetch(descriptor: DispatchDescriptor) -> str | None:
    """The fetch function the dispatch module exports, if any."""
    if descriptor.has_any_static_fetch:
        return STATIC_FETCH
    if descriptor.has_any_server_fetch:
        return SERVER_FETCH
    return None


def _exports(variant: LocaleVariant, fetch: str) -> bool:
    if fetch == STATIC_FETCH:
        return variant.has_static_fetch
    return variant.has_server_fetch


def _import_lines(descriptor: DispatchDescriptor, raw_query: str) -> list[str]:
    lines: list[str] = []
    for index, variant in enumerate(descriptor.files):
        names = f"Page_{index}"
        fetch = _variant_fetch(variant)
        if fetch is not None:
            names += f", {{ {fetch} as page_data_{index} }}"
        lines.append(f"import {names} from './{variant.name}?{raw_query}'")
    return lines


def _render_dispatcher(descriptor: DispatchDescriptor) -> list[str]:
    lines = [
        "export default function LocalizedPage (props) {",
        "  const { locale } = useRouter()",
    ]
    for index, variant in enumerate(descriptor.files):
        lines += [
            f"  if (locale === {json.dumps(variant.locale)}) {{",
            f"    return <Page_{index} {{...props}}/>",
            "  }",
        ]
    lines += [f"  return <Page_{descriptor.default_index} {{...props}}/>", "}"]
    return lines


def _fetch_dispatcher(descriptor: DispatchDescriptor, fetch: str) -> list[str]:
    def call(index: int) -> str:
        if _exports(descriptor.files[index], fetch):
            return f"return page_data_{index}(context)"
        return _EMPTY_PROPS

    lines = [
        f"export async function {fetch} (context) {{",
        "  const locale = context.locale",
    ]
    for index, variant in enumerate(descriptor.files):
        lines += [
            f"  if (locale === {json.dumps(variant.locale)}) {{",
            f"    {call(index)}",
            "  }",
        ]
    # Unmatched locales fetch like the default variant they render.
    lines += [f"  {call(descriptor.default_index)}", "}"]
    return lines


def generate_dispatch_module(
    descriptor: DispatchDescriptor,
    *,
    raw_query: str = "whisker-raw",
    router_module: str = "next/router",
) -> str:
    """Generate the locale-dispatching module source for a variant group.

    Args:
        descriptor: Analyzed locale variants.
        raw_query: Resource query that imports a variant without dispatching.
        router_module: Module exporting ``useRouter``.

    Raises:
        ContentError: If the descriptor has no variants.

    """
    if not descriptor.files:
        msg = "Cannot generate a locale dispatcher without locale variants"
        raise ContentError(msg)

    lines = [f"import {{ useRouter }} from '{router_module}'"]
    lines += _import_lines(descriptor, raw_query)
    lines.append("")
    lines += _render_dispatcher(descriptor)

    fetch = _group_fetch(descriptor)
    if fetch is not None:
        lines.append("")
        lines += _fetch_dispatcher(descriptor, fetch)

    return "\n".join(lines) + "\n"
