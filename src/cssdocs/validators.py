"""Documentation validation and coverage checks."""

from __future__ import annotations

from collections import Counter

from .models import ExtractionResult, ValidationResult


def validate_docs(result: ExtractionResult, strict: bool = False) -> ValidationResult:
    """Validate extracted documentation.

    Checks:
    1. Every @function should have a doc comment (warning in normal mode,
       error in strict)
    2. Documented functions should have a description (warning)
    3. @param names should match declared parameter names, otherwise the
       default value cannot be shown (warning)
    4. Declared parameters should be documented (warning)

    Args:
        result: Extraction result for one stylesheet
        strict: If True, undocumented functions are errors instead of warnings

    Returns:
        ValidationResult with errors and warnings
    """
    validation = ValidationResult()

    # A name may be declared more than once; only count the undocumented ones
    undocumented = Counter(result.all_functions)
    undocumented.subtract(f.name for f in result.functions)
    for name, count in undocumented.items():
        if count <= 0:
            continue
        msg = f"{name}: missing doc comment (undocumented)"
        if strict:
            validation.errors.append(msg)
        else:
            validation.warnings.append(msg)

    for doc in result.functions:
        if not doc.description:
            validation.warnings.append(
                f"{doc.name}: documented but missing description"
            )

        declared = {p.name for p in doc.parameters}
        documented = {p.name for p in doc.params}

        for name in sorted(documented - declared):
            validation.warnings.append(
                f"{doc.name}: @param {name} does not match a declared parameter"
            )

        # Only meaningful when the names line up at all
        if documented & declared:
            for name in sorted(declared - documented):
                validation.warnings.append(
                    f"{doc.name}: parameter {name} has no @param"
                )

    return validation


def compute_coverage(result: ExtractionResult) -> float:
    """Compute the share of @function definitions with a doc comment.

    Returns:
        Coverage between 0.0 and 1.0 (1.0 when there are no functions)
    """
    total = len(result.all_functions)
    return len(result.functions) / total if total > 0 else 1.0
