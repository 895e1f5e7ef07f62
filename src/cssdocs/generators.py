"""Markdown generator for extracted function documentation."""

from __future__ import annotations

from .config import DEFAULT_SOURCE_LINK
from .models import FunctionDoc

TITLE = "CSS Extras Function Reference"
INTRO = "Complete reference for all CSS custom functions in css-extras."

_LINK_GLYPH = "↗︎"


def _heading(f: FunctionDoc, source_link: str) -> str:
    return f"## `{f.name}()` [{_LINK_GLYPH}]({source_link}#L{f.line_number})"


def _param_lines(f: FunctionDoc) -> list[str]:
    defaults = f.defaults()
    lines = []
    for p in f.params:
        line = f"- **`{p.name}`** (`{p.type}`): {p.description}"
        # Exact name match only: "--n" does not pick up the default of "n"
        default = defaults.get(p.name)
        if default:
            line += f" Default: `{default}`"
        lines.append(line)
    return lines


def generate_function_markdown(
    f: FunctionDoc, source_link: str = DEFAULT_SOURCE_LINK
) -> list[str]:
    """Generate the lines documenting one function."""
    lines = [_heading(f, source_link), ""]

    if f.description:
        lines.extend([f.description, ""])

    if f.params:
        lines.extend(["### Parameters", ""])
        lines.extend(_param_lines(f))
        lines.append("")

    if f.returns:
        lines.extend(
            ["### Returns", "", f"`{f.returns.type}`: {f.returns.description}", ""]
        )

    if f.example:
        lines.extend(["### Example", "", "```css", f.example])
        if f.example_output:
            lines.append(f"/* Output: {f.example_output} */")
        lines.extend(["```", ""])

    lines.extend(["---", ""])
    return lines


def generate_markdown(
    functions: list[FunctionDoc],
    source_link: str = DEFAULT_SOURCE_LINK,
    title: str = TITLE,
    intro: str = INTRO,
) -> str:
    """Generate the function reference document, in source order."""
    lines = [
        f"# {title}",
        "",
        intro,
        "",
        f"**Total functions:** {len(functions)}",
        "",
        "---",
        "",
    ]

    for f in functions:
        lines.extend(generate_function_markdown(f, source_link))

    # Every line, including the last, ends with a newline
    return "\n".join(lines) + "\n"
