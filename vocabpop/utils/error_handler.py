"""Error handling utilities"""


class ErrorCollector:
    """Utility class for collecting and reporting recoverable problems"""

    def __init__(self) -> None:
        self.warnings: list[str] = []

    def add_warning(self, warning: str) -> None:
        """Add a warning to the collection"""
        self.warnings.append(warning)

    def has_warnings(self) -> bool:
        """Check if any warnings were collected"""
        return len(self.warnings) > 0

    def get_summary(self) -> str:
        """Get a summary of all collected warnings"""
        if not self.warnings:
            return "No warnings"

        summary_parts = [f"{len(self.warnings)} warnings:"]
        for i, warning in enumerate(self.warnings, 1):
            summary_parts.append(f"  {i}. {warning}")
        return "\n".join(summary_parts)

    def clear(self) -> None:
        self.warnings.clear()
