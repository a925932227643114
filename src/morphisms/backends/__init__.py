"""Backends for rendering compositions (DOT, ...)."""

from .dot_generator import DotMode, generate_dot

__all__ = ["DotMode", "generate_dot"]
