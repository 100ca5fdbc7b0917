"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class EntityValidationError(Exception):
    """Raised when a required field is missing or blank.

    Reported synchronously to the caller; nothing has been written yet.
    """

    def __init__(self, entity_type: str, field: str, message: str):
        self.entity_type = entity_type
        self.field = field
        self.message = message
        super().__init__(f"{entity_type}.{field}: {message}")


class EmptyReportError(Exception):
    """Raised when a report export is requested for a filter with no matches."""

    def __init__(self, filter_summary: str = ""):
        self.filter_summary = filter_summary
        message = "No pieces match the report filters"
        if filter_summary:
            message = f"{message} ({filter_summary})"
        super().__init__(message)
