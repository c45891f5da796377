"""Single-pass lexical metrics collection for source text.

Every signal here is a cheap textual heuristic rather than a parse: braces inside
string literals move the nesting depth, "hacking" counts as a hack, and lines inside
a block comment that do not start with ``*`` count as code. Scores must stay
comparable between releases, so these quirks are kept.
"""

import math
import re

from codemood.core.models import MetricsRecord

POSITIVE_WORDS = (
    "success",
    "happy",
    "great",
    "excellent",
    "good",
    "nice",
    "awesome",
    "perfect",
    "wonderful",
    "beautiful",
    "clean",
    "elegant",
)
NEGATIVE_WORDS = (
    "hack",
    "fixme",
    "bug",
    "ugly",
    "terrible",
    "bad",
    "broken",
    "deprecated",
    "legacy",
    "wtf",
    "horrible",
    "nightmare",
)
STRESS_WORDS = ("urgent", "asap", "critical", "emergency", "deadline", "hurry", "rush")

COMMENT_PREFIXES = ("//", "/*", "*")

# Whitespace removed when trimming a line; unlike str.strip() this includes the BOM
# and excludes the ASCII information separators.
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Stands in for \s, whose Unicode and ASCII flavours both differ from the set above.
SPACE = f"[{re.escape(TRIM_CHARS)}]"

FUNCTION_PATTERN = re.compile(
    rf"function{SPACE}+\w+|=>{SPACE}*\{{|\bconst{SPACE}+\w+{SPACE}*={SPACE}*(?:async{SPACE}+)?(?:function|\()",
    re.ASCII,
)
VARIABLE_PATTERN = re.compile(rf"(?:const|let|var){SPACE}+\w+", re.ASCII)
TEST_PATTERN = re.compile(rf"(?:describe|it|test|expect|assert){SPACE}*\(")


def _word_pattern(words: tuple[str, ...]) -> re.Pattern[str]:
    """Compile a case-insensitive whole-word matcher for a vocabulary."""
    alternatives = "|".join(re.escape(word) for word in words)
    return re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE | re.ASCII)


POSITIVE_PATTERN = _word_pattern(POSITIVE_WORDS)
NEGATIVE_PATTERN = _word_pattern(NEGATIVE_WORDS)
STRESS_PATTERN = _word_pattern(STRESS_WORDS)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up (52.5 -> 53)."""
    return math.floor(value + 0.5)


def _text_length(text: str) -> int:
    """Length in UTF-16 code units, so astral characters count twice."""
    return len(text.encode("utf-16-le", errors="surrogatepass")) // 2


def collect(text: str | None, filename: str = "unknown") -> MetricsRecord:
    """Extract mood metrics from source text.

    Args:
        text: Full file contents. None is treated as an empty file.
        filename: Display label stored on the record.

    Returns:
        MetricsRecord for the text. Never raises.
    """
    text = text or ""
    lines = text.split("\n")

    code_lines = 0
    comment_lines = 0
    blank_lines = 0
    total_length = 0
    longest_line = 0
    shortest_line: int | None = None
    exclamation_marks = 0
    question_marks = 0
    function_count = 0
    variable_declarations = 0
    current_depth = 0
    max_depth = 0

    for line in lines:
        trimmed = line.strip(TRIM_CHARS)

        if not trimmed:
            blank_lines += 1
        elif trimmed.startswith(COMMENT_PREFIXES):
            comment_lines += 1
        else:
            code_lines += 1

        if trimmed:
            length = _text_length(trimmed)
            total_length += length
            longest_line = max(longest_line, length)
            shortest_line = length if shortest_line is None else min(shortest_line, length)

        exclamation_marks += line.count("!")
        question_marks += line.count("?")

        current_depth += line.count("{")
        current_depth -= line.count("}")
        max_depth = max(max_depth, current_depth)

        if FUNCTION_PATTERN.search(line):
            function_count += 1
        if VARIABLE_PATTERN.search(line):
            variable_declarations += 1

    non_blank_lines = len(lines) - blank_lines
    lower_text = text.lower()

    return MetricsRecord(
        filename=filename,
        total_lines=len(lines),
        code_lines=code_lines,
        comment_lines=comment_lines,
        blank_lines=blank_lines,
        avg_line_length=round_half_up(total_length / non_blank_lines) if non_blank_lines else 0,
        longest_line=longest_line,
        shortest_non_empty_line=shortest_line or 0,
        exclamation_marks=exclamation_marks,
        question_marks=question_marks,
        positive_words=len(POSITIVE_PATTERN.findall(text)),
        negative_words=len(NEGATIVE_PATTERN.findall(text)),
        stress_words=len(STRESS_PATTERN.findall(text)),
        todo_count=lower_text.count("todo"),
        fixme_count=lower_text.count("fixme"),
        hack_count=lower_text.count("hack"),
        function_count=function_count,
        variable_declarations=variable_declarations,
        nesting_depth=max_depth,
        has_tests=TEST_PATTERN.search(text) is not None,
    )
