"""Config sub-models for the delimited input format and the HTML output."""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)


def _single_char(value: str | None, field_name: str) -> str | None:
    if value is not None and len(value) != 1:
        msg = f"{field_name} must be a single character, got {value!r}"
        raise ValueError(msg)
    return value


class CsvFormat(BaseModel):
    """Delimited text format understood by the record parser."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    delimiter: str = ","
    quote_char: str = '"'
    escape_char: str | None = "\\"
    comment_marker: str | None = "#"
    trim: bool = True

    @field_validator("delimiter", "quote_char", "escape_char", "comment_marker")
    @classmethod
    def validate_single_char(
        cls, v: str | None, info: ValidationInfo
    ) -> str | None:
        """Each special character must be exactly one character long."""
        return _single_char(v, info.field_name)

    @model_validator(mode="after")
    def validate_distinct(self) -> CsvFormat:
        """Special characters must not collide with each other."""
        specials = [
            c
            for c in (
                self.delimiter,
                self.quote_char,
                self.escape_char,
                self.comment_marker,
            )
            if c is not None
        ]
        if len(specials) != len(set(specials)):
            msg = f"CSV special characters must be distinct, got {specials}"
            raise ValueError(msg)
        return self


class RenderOptions(BaseModel):
    """Options for the cloze table renderer."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    table_class: str = Field(default="fred", min_length=1)
    # Replaces the generated stylesheet verbatim when set
    style: str | None = None
    literal_sentinel: str = Field(default="¿", min_length=1)
    # Literal cells keep their slot in the cloze numbering
    literal_cells_reserve_number: bool = True


__all__ = [
    "CsvFormat",
    "RenderOptions",
]
