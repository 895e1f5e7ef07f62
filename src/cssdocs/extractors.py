"""Documentation extractor for CSS @function definitions."""

from __future__ import annotations

import logging
import re
from bisect import bisect_left
from dataclasses import dataclass, field

from .models import (
    CommentSpan,
    ExtractionResult,
    FunctionDoc,
    FunctionSite,
    Parameter,
    ParamDoc,
    ReturnsDoc,
)

log = logging.getLogger(__name__)

COMMENT_OPEN = "/**"
COMMENT_CLOSE = "*/"

_FUNCTION_HEAD = re.compile(r"@function\s+(--[A-Za-z0-9_-]+)\s*\(")
_BODY_OPEN = re.compile(r"\)\s*\{")
_NON_SPACE = re.compile(r"\S")

_PARAM_TAG = re.compile(r"@param\s+\{([^}]+)\}\s+(--[A-Za-z0-9_-]+)\s+-?\s*(.*)$")
_RETURNS_TAG = re.compile(r"@returns\s+\{([^}]+)\}\s+(.*)$")

# Sections that collect untagged lines, and the field each one fills
_ACCUMULATING = {
    "description": "description",
    "example": "example",
    "output": "example_output",
}


@dataclass
class ParsedComment:
    """Fields parsed from one doc comment."""

    description: str = ""
    params: list[ParamDoc] = field(default_factory=list)
    returns: ReturnsDoc | None = None
    example: str | None = None
    example_output: str | None = None


def scan_comments(text: str) -> list[CommentSpan]:
    """Find every /** ... */ block in document order."""
    spans: list[CommentSpan] = []
    pos = 0
    while True:
        start = text.find(COMMENT_OPEN, pos)
        if start == -1:
            break
        close = text.find(COMMENT_CLOSE, start + len(COMMENT_OPEN))
        if close == -1:
            # Unterminated: nothing after this can close either
            break
        end = close + len(COMMENT_CLOSE)
        spans.append(
            CommentSpan(
                content=text[start + len(COMMENT_OPEN) : close], start=start, end=end
            )
        )
        pos = end
    return spans


def scan_functions(text: str) -> list[FunctionSite]:
    """Find every `@function --name(...) {` opening in document order.

    The parameter text runs up to the first `)` that is followed by `{`,
    so a head without a body never matches and scanning stops there.
    """
    sites: list[FunctionSite] = []
    pos = 0
    line = 1
    counted = 0
    while True:
        head = _FUNCTION_HEAD.search(text, pos)
        if head is None:
            break
        body = _BODY_OPEN.search(text, head.end())
        if body is None:
            break

        start = head.start()
        line += text.count("\n", counted, start)
        counted = start

        sites.append(
            FunctionSite(
                name=head.group(1),
                parameters_text=text[head.end() : body.start()],
                start=start,
                line_number=line,
            )
        )
        pos = body.end()
    return sites


class CommentIndex:
    """Comment spans indexed by end offset for adjacency lookups."""

    def __init__(self, text: str, comments: list[CommentSpan]):
        self._comments = comments
        self._ends = [c.end for c in comments]
        # Offset of the first non-whitespace character after each comment
        self._next_text = []
        for c in comments:
            match = _NON_SPACE.search(text, c.end)
            self._next_text.append(match.start() if match else len(text))

    def preceding(self, offset: int) -> CommentSpan | None:
        """Return the comment documenting a declaration at offset, if any.

        Only the nearest comment ending before offset is considered, and
        only whitespace may separate the two.
        """
        i = bisect_left(self._ends, offset) - 1
        if i < 0 or self._next_text[i] < offset:
            return None
        return self._comments[i]


def _append_line(parsed: ParsedComment, attr: str, line: str) -> None:
    current = getattr(parsed, attr)
    # Example and output already hold their tag text, even when it is empty
    if attr == "description" and not current:
        parsed.description = line
    else:
        setattr(parsed, attr, f"{current}\n{line}")


def parse_comment(comment: str) -> ParsedComment:
    """Parse the inner text of a doc comment.

    Lines are read with a section cursor starting at "description". Tags
    move the cursor; a malformed @param or @returns line is dropped but
    still moves it. Untagged lines extend the description, example or
    output, whichever the cursor is on.
    """
    parsed = ParsedComment()
    section = "description"

    for raw in comment.split("\n"):
        line = raw.strip()
        if not line:
            continue

        if line.startswith("@param"):
            match = _PARAM_TAG.search(line)
            if match:
                parsed.params.append(
                    ParamDoc(
                        type=match.group(1),
                        name=match.group(2),
                        description=match.group(3),
                    )
                )
            section = "params"
        elif line.startswith("@returns"):
            match = _RETURNS_TAG.search(line)
            if match:
                parsed.returns = ReturnsDoc(
                    type=match.group(1), description=match.group(2)
                )
            section = "returns"
        elif line.startswith("@example"):
            parsed.example = line[len("@example") :].strip()
            section = "example"
        elif line.startswith("@output"):
            parsed.example_output = line[len("@output") :].strip()
            section = "output"
        elif line.startswith("@"):
            continue  # Unknown tag
        elif section in _ACCUMULATING:
            _append_line(parsed, _ACCUMULATING[section], line)

    return parsed


def parse_parameters(parameters_text: str) -> list[Parameter]:
    """Split a raw parameter list into names and default values."""
    if not parameters_text.strip():
        return []

    parameters = []
    for part in parameters_text.split(","):
        name, sep, default = part.strip().partition(":")
        parameters.append(
            Parameter(name=name.strip(), default_value=default.strip() if sep else None)
        )
    return parameters


def extract_css_docs(text: str) -> ExtractionResult:
    """Extract documentation for every commented @function in text."""
    comments = scan_comments(text)
    sites = scan_functions(text)
    index = CommentIndex(text, comments)
    log.debug("Scanned %d comments, %d functions", len(comments), len(sites))

    docs: list[FunctionDoc] = []
    for site in sites:
        comment = index.preceding(site.start)
        if comment is None:
            log.debug("%s (line %d) has no doc comment", site.name, site.line_number)
            continue

        parsed = parse_comment(comment.content)
        docs.append(
            FunctionDoc(
                name=site.name,
                line_number=site.line_number,
                parameters=parse_parameters(site.parameters_text),
                description=parsed.description,
                params=parsed.params,
                returns=parsed.returns,
                example=parsed.example,
                example_output=parsed.example_output,
            )
        )

    return ExtractionResult(functions=docs, all_functions=[s.name for s in sites])


def parse_functions(text: str) -> list[FunctionDoc]:
    """Return documentation records for text in source order."""
    return extract_css_docs(text).functions
