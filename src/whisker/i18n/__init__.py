"""Locale routing — analyze locale variants of a page and generate the
module that picks the right one at render time."""

from whisker.i18n.analyzer import DispatchDescriptor, LocaleVariant, analyze_locale_variants
from whisker.i18n.dispatch import generate_dispatch_module

__all__ = [
    "DispatchDescriptor",
    "LocaleVariant",
    "analyze_locale_variants",
    "generate_dispatch_module",
]
