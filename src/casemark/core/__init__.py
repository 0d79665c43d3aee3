"""Compilation pipeline for casemark."""

from casemark.core.compiler import CompilationError, StructuredTextCompiler

__all__ = [
    "CompilationError",
    "StructuredTextCompiler",
]
