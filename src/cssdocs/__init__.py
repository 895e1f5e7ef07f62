"""
cssdocs - Markdown reference generator for CSS @function libraries.

This package provides:
- extract_css_docs / parse_functions: doc comment extraction
- generate_markdown: the reference document renderer
- validate_docs / compute_coverage: documentation quality checks
"""

from .errors import (
    CssDocsError,
    OutputWriteError,
    SourceReadError,
    ValidationFailedError,
)
from .extractors import (
    extract_css_docs,
    parse_comment,
    parse_functions,
    parse_parameters,
)
from .generators import generate_markdown
from .models import ExtractionResult, FunctionDoc, Parameter, ParamDoc, ReturnsDoc
from .validators import compute_coverage, validate_docs

__all__ = [
    "CssDocsError",
    "ExtractionResult",
    "FunctionDoc",
    "OutputWriteError",
    "ParamDoc",
    "Parameter",
    "ReturnsDoc",
    "SourceReadError",
    "ValidationFailedError",
    "compute_coverage",
    "extract_css_docs",
    "generate_markdown",
    "parse_comment",
    "parse_functions",
    "parse_parameters",
    "validate_docs",
]
