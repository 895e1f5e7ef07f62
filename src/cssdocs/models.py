"""Data models for documentation extraction."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CommentSpan:
    """A `/** ... */` block located in the source."""

    content: str  # Text between the markers
    start: int
    end: int  # Exclusive


@dataclass
class FunctionSite:
    """A located `@function --name(...) {` opening."""

    name: str  # "--double", sigil included
    parameters_text: str  # Raw text between the parentheses
    start: int
    line_number: int


@dataclass
class Parameter:
    """A declared parameter from the function signature."""

    name: str
    default_value: str | None = None


@dataclass
class ParamDoc:
    """A documented parameter from an @param tag."""

    type: str
    name: str
    description: str


@dataclass
class ReturnsDoc:
    """The documented return value from an @returns tag."""

    type: str
    description: str


@dataclass
class FunctionDoc:
    """Extracted function documentation."""

    name: str
    line_number: int
    parameters: list[Parameter] = field(default_factory=list)  # Declared
    description: str = ""
    params: list[ParamDoc] = field(default_factory=list)  # Documented
    returns: ReturnsDoc | None = None
    example: str | None = None
    example_output: str | None = None

    def defaults(self) -> dict[str, str]:
        """Map declared parameter names to their default values."""
        return {
            p.name: p.default_value
            for p in self.parameters
            if p.default_value is not None
        }


@dataclass
class ValidationResult:
    """Results from documentation validation."""

    errors: list[str] = field(default_factory=list)  # Build fails if non-empty
    warnings: list[str] = field(default_factory=list)  # Printed but allowed


@dataclass
class ExtractionResult:
    """Results from extracting documentation."""

    functions: list[FunctionDoc]  # Documented only, source order
    all_functions: list[str]  # Every @function found, source order
