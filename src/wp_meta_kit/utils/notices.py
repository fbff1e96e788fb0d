"""Human-readable rendering of import outcomes."""

from ..models.export_format import ImportSummary

ERROR_MESSAGES: dict[str, str] = {
    "upload_failed": "the import file could not be read",
    "export_write_failed": "the export file could not be written",
    "invalid_json": "the import file is not a valid JSON export",
    "store_unavailable": "the site could not be reached",
    "invalid_response": "the site did not answer with REST API data",
    "store_write_failed": "a meta description could not be saved",
    "store_error": "the site rejected the request",
    "unknown": "an unexpected error occurred",
}


def render_summary(summary: ImportSummary) -> str:
    """Render an import summary as plain text.

    Example:
        >>> print(render_summary(ImportSummary(updated_count=3)))
        Import successful!
        Updated: 3 items
    """
    lines = [
        "Import successful!",
        f"Updated: {summary.updated_count} items",
    ]

    if summary.not_found_count > 0:
        lines.append(f"Not found: {summary.not_found_count} items")
        lines.extend(f"  - {entry}" for entry in summary.not_found_entries)

    return "\n".join(lines)


def render_error(detail: str, message: str | None = None, *, operation: str = "Import") -> str:
    """Render an export or import failure.

    Args:
        detail: Error detail code (e.g., "invalid_json")
        message: Optional technical message appended on its own line
        operation: Name of the failed operation
    """
    text = f"{operation} failed: {ERROR_MESSAGES.get(detail, detail)}"
    if message:
        text = f"{text}\n{message}"
    return text
