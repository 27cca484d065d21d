"""DateService: parse, check, format, and date arithmetic as ServiceResults.

Uses the checked domain API throughout and converts every
:class:`~datestr.domain.errors.DateError` into a ``ServiceError`` carrying
the error's code and offending value. A
:class:`~datestr.domain.errors.DatePanic` (structurally malformed input)
is reported the same way under ``MALFORMED_INPUT``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from datestr.domain.errors import DateError, DatePanic
from datestr.domain.formatting import DateFormat
from datestr.domain.parsing import try_parse
from datestr.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from datestr.config.models import FormatConfig
    from datestr.domain.date import Date

logger = logging.getLogger(__name__)


def _error_result(op: str, exc: DateError | DatePanic, **detail: Any) -> ServiceResult:
    detail = {**(exc.detail if isinstance(exc, DateError) else {}), **detail}
    logger.debug("%s failed: %s (%s)", op, exc, exc.code)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=str(exc), detail=detail),
    )


def _date_payload(date: Date) -> dict[str, Any]:
    return {
        "date": str(date),
        "year": date.year.value,
        "month": date.month.value,
        "day": date.day.value,
    }


class DateService:
    """Date operations over the configured default format.

    Usage::

        svc = DateService(settings.format)
        result = svc.format("2022-12-29", template="dd/mm/yyyy", separator="/")
    """

    def __init__(self, format_config: FormatConfig) -> None:
        self._format = format_config

    def parse(self, text: str) -> ServiceResult:
        """Parse a single date string."""
        op = "parse"
        logger.debug("parse %r", text)
        try:
            date = try_parse(text)
        except (DateError, DatePanic) as exc:
            return _error_result(op, exc, input=text)
        return ServiceResult(ok=True, op=op, data=_date_payload(date))

    def check(self, texts: list[str]) -> ServiceResult:
        """Validate several date strings; invalid ones become items, not errors."""
        items: list[dict[str, Any]] = []
        for text in texts:
            try:
                date = try_parse(text)
            except (DateError, DatePanic) as exc:
                items.append(
                    {"input": text, "valid": False, "code": exc.code, "error": str(exc)}
                )
                continue
            items.append({"input": text, "valid": True, "date": str(date)})

        valid_count = sum(1 for item in items if item["valid"])
        logger.debug("check %d inputs, %d valid", len(items), valid_count)
        return ServiceResult(
            ok=True,
            op="check",
            data={
                "count": len(items),
                "valid_count": valid_count,
                "invalid_count": len(items) - valid_count,
                "items": items,
            },
        )

    def format(
        self,
        text: str,
        *,
        template: str | None = None,
        separator: str | None = None,
    ) -> ServiceResult:
        """Render *text* through a template (configured default when omitted)."""
        op = "format"
        tpl = template if template is not None else self._format.template
        sep = separator if separator is not None else self._format.separator
        try:
            fmt = DateFormat.from_template(tpl, sep)
            date = try_parse(text)
        except (DateError, DatePanic) as exc:
            return _error_result(op, exc, input=text)
        formatted = date.try_format(fmt)
        logger.debug("format %s with %s -> %s", date, fmt, formatted)
        return ServiceResult(
            ok=True,
            op=op,
            data={"date": str(date), "template": fmt.template, "formatted": formatted},
        )

    def add(self, left: str, right: str) -> ServiceResult:
        """Add two dates with day -> month -> year carries."""
        return self._arithmetic("add", left, right)

    def subtract(self, left: str, right: str) -> ServiceResult:
        """Subtract *right* from *left* with borrows."""
        return self._arithmetic("subtract", left, right)

    def _arithmetic(self, op: str, left: str, right: str) -> ServiceResult:
        try:
            lhs = try_parse(left)
            rhs = try_parse(right)
            result = lhs + rhs if op == "add" else lhs - rhs
        except (DateError, DatePanic) as exc:
            return _error_result(op, exc, left=left, right=right)

        warnings: list[str] = []
        valid = result.is_valid()
        if not valid:
            warnings.append(f"Result {result} exceeds the day ceiling for its month")
        logger.debug("%s %s %s -> %s", op, lhs, rhs, result)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "left": str(lhs),
                "right": str(rhs),
                "result": str(result),
                "valid": valid,
            },
            warnings=warnings,
        )
