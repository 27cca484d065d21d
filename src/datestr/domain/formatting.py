"""Format templates and rendering.

A template must contain each of the tokens ``YYYY``, ``MM`` and ``DD``
(case-insensitive) as one of its *separator*-delimited pieces. Extra,
unrecognized pieces are tolerated. Rendering replaces the tokens with
unpadded numbers and keeps every other character of the template.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import BaseModel

from datestr.domain.errors import FormatError

if TYPE_CHECKING:
    from datestr.domain.date import Date

# Replacement order matters: YYYY before MM before DD.
FORMAT_TOKENS: tuple[str, ...] = ("YYYY", "MM", "DD")

DEFAULT_SEPARATOR = "-"
DEFAULT_TEMPLATE = "YYYY-MM-DD"


class DateFormat(BaseModel):
    """A validated, uppercased format template.

    Attributes:
        template: The template with tokens normalized to uppercase.
        separator: The character the template was validated against.
    """

    model_config = {"frozen": True}

    template: str
    separator: str = DEFAULT_SEPARATOR

    @classmethod
    def from_template(cls, template: str, separator: str | None = None) -> Self:
        """Validate *template* and build a DateFormat.

        Raises:
            FormatError: If a token is missing from the split pieces, or
                *separator* is not a single character.

        Examples:
            >>> DateFormat.from_template("dd/mm/yyyy", "/").template
            'DD/MM/YYYY'
        """
        sep = DEFAULT_SEPARATOR if separator is None else separator
        if len(sep) != 1:
            raise FormatError(template)
        normalized = template.upper()
        pieces = normalized.split(sep)
        if not all(token in pieces for token in FORMAT_TOKENS):
            raise FormatError(template)
        return cls(template=normalized, separator=sep)

    def render(self, date: Date) -> str:
        """Substitute *date*'s components into the template."""
        values = {
            "YYYY": str(date.year.value),
            "MM": str(date.month.value),
            "DD": str(date.day.value),
        }
        rendered = self.template
        for token in FORMAT_TOKENS:
            rendered = rendered.replace(token, values[token])
        return rendered

    def __str__(self) -> str:
        return self.template

