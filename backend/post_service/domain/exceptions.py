"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist.

    ``entity_id`` is ``None`` when a collection lookup came back empty and
    the store reports that as "not found".
    """

    def __init__(self, entity_type: str, entity_id: int | str | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        if entity_id is None:
            message = f"No {entity_type} records found"
        else:
            message = f"{entity_type} with id '{entity_id}' not found"
        super().__init__(message)


class StoreError(Exception):
    """Raised when the persistence layer fails to complete an operation."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StoreConnectivityError(StoreError):
    """Raised when the database cannot be reached or the connection drops."""


class ModificationNotPermittedError(StoreError):
    """Raised when the database refuses a data modification (SQLSTATE 2F002)."""


class ModerationError(Exception):
    """Raised when the moderation provider reports an error."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
