"""Tests for the Markdown generator."""

from cssdocs.extractors import parse_functions
from cssdocs.generators import generate_function_markdown, generate_markdown
from cssdocs.models import FunctionDoc, Parameter, ParamDoc, ReturnsDoc

HEADER = (
    "# CSS Extras Function Reference\n"
    "\n"
    "Complete reference for all CSS custom functions in css-extras.\n"
    "\n"
)


def test_empty_document():
    assert generate_markdown([]) == HEADER + "**Total functions:** 0\n\n---\n\n"


def test_double_example(double_css):
    markdown = generate_markdown(parse_functions(double_css))
    assert markdown == (
        HEADER
        + "**Total functions:** 1\n"
        "\n"
        "---\n"
        "\n"
        "## `--double()` [↗︎](../index.css#L8)\n"
        "\n"
        "Doubles a number.\n"
        "\n"
        "### Parameters\n"
        "\n"
        "- **`--n`** (`number`): The input.\n"
        "\n"
        "### Returns\n"
        "\n"
        "`number`: The doubled value.\n"
        "\n"
        "### Example\n"
        "\n"
        "```css\n"
        "--double(2)\n"
        "/* Output: 4 */\n"
        "```\n"
        "\n"
        "---\n"
        "\n"
    )


def test_default_needs_exact_name_match(double_css):
    # Declared "n" does not match documented "--n"
    markdown = generate_markdown(parse_functions(double_css))
    assert "Default:" not in markdown

    css = double_css.replace("--double(n: 1)", "--double(--n: 1)")
    markdown = generate_markdown(parse_functions(css))
    assert "- **`--n`** (`number`): The input. Default: `1`\n" in markdown


def test_no_default_without_value():
    f = FunctionDoc(
        name="--f",
        line_number=1,
        parameters=[Parameter(name="--a"), Parameter(name="--b", default_value="")],
        params=[
            ParamDoc(type="number", name="--a", description="A."),
            ParamDoc(type="number", name="--b", description="B."),
        ],
    )
    lines = generate_function_markdown(f)
    assert "- **`--a`** (`number`): A." in lines
    assert "- **`--b`** (`number`): B." in lines


def test_absent_fields_render_no_sections():
    f = FunctionDoc(name="--bare", line_number=3)
    assert generate_function_markdown(f) == [
        "## `--bare()` [↗︎](../index.css#L3)",
        "",
        "---",
        "",
    ]


def test_output_without_example_is_not_rendered():
    f = FunctionDoc(name="--f", line_number=1, example_output="4")
    lines = generate_function_markdown(f)
    assert "### Example" not in lines
    assert not any("Output" in line for line in lines)


def test_example_without_output():
    f = FunctionDoc(name="--f", line_number=1, example="--f()")
    lines = generate_function_markdown(f)
    assert lines[2:] == ["### Example", "", "```css", "--f()", "```", "", "---", ""]


def test_returns_section():
    f = FunctionDoc(
        name="--f", line_number=1, returns=ReturnsDoc(type="color", description="A color.")
    )
    assert "`color`: A color." in generate_function_markdown(f)


def test_custom_source_link():
    f = FunctionDoc(name="--f", line_number=12)
    markdown = generate_markdown([f], source_link="https://example.com/index.css")
    assert "## `--f()` [↗︎](https://example.com/index.css#L12)\n" in markdown


def test_functions_keep_input_order():
    functions = [
        FunctionDoc(name="--zeta", line_number=1),
        FunctionDoc(name="--alpha", line_number=5),
    ]
    markdown = generate_markdown(functions)
    assert "**Total functions:** 2\n" in markdown
    assert markdown.index("--zeta") < markdown.index("--alpha")


def test_deterministic(double_css):
    functions = parse_functions(double_css)
    assert generate_markdown(functions) == generate_markdown(functions)


def test_example_starting_on_next_line(double_css):
    css = double_css.replace("@example --double(2)", "@example\n.box { width: --double(2px); }")
    markdown = generate_markdown(parse_functions(css))
    assert "```css\n\n.box { width: --double(2px); }\n/* Output: 4 */\n```\n" in markdown
