"""
TMS Error Summary Builder
Groups a form's ordered error list for pop-up display
"""
from typing import Iterable, List

from .results import ErrorSection, ErrorSummary, ErrorType, FieldError

SECTION_TITLES = (
    (ErrorType.REQUIRED, "Required Fields Missing"),
    (ErrorType.FORMAT, "Format Errors"),
    (ErrorType.CUSTOM, "Validation Errors"),
)

SUMMARY_SUBTITLE = "Please correct the following issues before submitting:"


def generate_error_summary(error_list: Iterable[FieldError]) -> ErrorSummary:
    """
    Group errors by type, omitting empty sections.

    The title is singular only for exactly one error, so an empty list gives
    "0 Validation Errors Found".
    """
    entries: List[FieldError] = list(error_list)
    count = len(entries)

    sections = []
    for error_type, title in SECTION_TITLES:
        messages = [entry.error for entry in entries if entry.type == error_type]
        if messages:
            sections.append(ErrorSection(title=title, errors=messages))

    return ErrorSummary(
        title=f"{count} Validation Error{'' if count == 1 else 's'} Found",
        subtitle=SUMMARY_SUBTITLE,
        sections=sections,
        first_field=entries[0].field if entries else None,
        total_count=count,
    )
