"""Tests for documentation validation and coverage."""

from cssdocs.extractors import extract_css_docs
from cssdocs.models import ExtractionResult
from cssdocs.validators import compute_coverage, validate_docs

CSS = """/**
Clamps a value.
@param {number} --value The value.
@param {number} --max The upper bound.
*/
@function --clamp(--value, --max: 1, --min: 0) {}

@function --undocumented() {}
"""


def test_undocumented_is_warning():
    validation = validate_docs(extract_css_docs(CSS))
    assert validation.errors == []
    assert "--undocumented: missing doc comment (undocumented)" in validation.warnings


def test_undocumented_is_error_when_strict():
    validation = validate_docs(extract_css_docs(CSS), strict=True)
    assert validation.errors == ["--undocumented: missing doc comment (undocumented)"]


def test_undeclared_param_name():
    css = "/**\nDoubles.\n@param {number} --n The input.\n*/\n@function --double(n: 1) {}"
    validation = validate_docs(extract_css_docs(css))
    assert validation.warnings == [
        "--double: @param --n does not match a declared parameter"
    ]


def test_undocumented_parameter():
    validation = validate_docs(extract_css_docs(CSS))
    assert "--clamp: parameter --min has no @param" in validation.warnings


def test_missing_description():
    css = "/**\n@returns {number} Something.\n*/\n@function --f() {}"
    validation = validate_docs(extract_css_docs(css))
    assert validation.warnings == ["--f: documented but missing description"]


def test_clean_docs():
    css = "/**\nDoubles.\n@param {number} --n The input.\n*/\n@function --double(--n) {}"
    validation = validate_docs(extract_css_docs(css))
    assert validation.errors == []
    assert validation.warnings == []


def test_coverage():
    assert compute_coverage(extract_css_docs(CSS)) == 0.5


def test_coverage_no_functions():
    assert compute_coverage(ExtractionResult(functions=[], all_functions=[])) == 1.0
