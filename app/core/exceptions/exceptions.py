class AppError(Exception):
    """Base class for all application-level errors."""
    pass


class DomainError(AppError):
    """Base for domain logic errors."""
    pass

class InvalidListQueryError(DomainError, ValueError):
    def __init__(self, detail: str):
        self.detail = detail
        self.message = f"Invalid list query: {detail}"
        super().__init__(self.message)

class UnknownResourceError(DomainError):
    def __init__(self, resource: str):
        self.resource = resource
        self.message = f"Unknown admin resource '{resource}'."
        super().__init__(self.message)

class RecordNotFoundError(DomainError):
    def __init__(self, resource: str, record_id: str):
        self.resource = resource
        self.record_id = record_id
        self.message = f"No {resource} record with id '{record_id}'."
        super().__init__(self.message)



class InfrastructureError(AppError):
    """Base for infrastructure-related errors (DB, API, etc)."""
    pass

class DatabaseConnectionError(InfrastructureError):
    def __init__(self, db_name: str, detail: str = ""):
        self.message = f"Could not query database '{db_name}': {detail}"
        super().__init__(self.message)

class ExternalAPIError(InfrastructureError):
    def __init__(self, service: str, detail: str = ""):
        self.message = f"Error with external service '{service}': {detail}"
        super().__init__(self.message)
