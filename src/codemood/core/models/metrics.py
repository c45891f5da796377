"""Per-file metrics extracted by the collector."""

from pydantic import BaseModel, ConfigDict, Field


class MetricsRecord(BaseModel):
    """Lexical and structural counts for one source file.

    Produced once per file by ``collect`` and never mutated. Only ``filename`` is
    informational; every other field feeds the classifier or the suggestions.
    """

    model_config = ConfigDict(frozen=True)

    filename: str = Field(description="Display label, not used in scoring")
    total_lines: int = Field(ge=1, description="Number of newline-delimited segments")
    code_lines: int = Field(ge=0)
    comment_lines: int = Field(ge=0)
    blank_lines: int = Field(ge=0)
    avg_line_length: int = Field(ge=0, description="Mean trimmed length of non-blank lines")
    longest_line: int = Field(ge=0)
    shortest_non_empty_line: int = Field(ge=0)
    exclamation_marks: int = Field(ge=0)
    question_marks: int = Field(ge=0)
    positive_words: int = Field(ge=0)
    negative_words: int = Field(ge=0)
    stress_words: int = Field(ge=0)
    todo_count: int = Field(ge=0)
    fixme_count: int = Field(ge=0)
    hack_count: int = Field(ge=0)
    function_count: int = Field(ge=0)
    variable_declarations: int = Field(ge=0)
    nesting_depth: int = Field(ge=0, description="Maximum running brace balance")
    has_tests: bool = False

    @property
    def comment_ratio(self) -> float:
        """Comment lines per code line, guarded against files with no code."""
        return self.comment_lines / max(self.code_lines, 1)

    @property
    def punctuation_density(self) -> float:
        """Exclamation and question marks per line."""
        return (self.exclamation_marks + self.question_marks) / max(self.total_lines, 1)
