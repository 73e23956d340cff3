"""Shared type definitions for whisker."""

from typing import Literal

# What a single compilation produced
type ModuleKind = Literal["page", "dispatch", "raw"]
