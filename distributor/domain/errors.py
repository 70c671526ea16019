"""Configuration errors — malformed input data that aborts a distribution run."""


class ConfigurationError(ValueError):
    """Base class for fatal input-data problems."""


class UnknownOfficeError(ConfigurationError):
    def __init__(self, manager_id: str, office_id: str):
        self.manager_id = manager_id
        self.office_id = office_id
        super().__init__(f"Manager {manager_id!r} references unknown office {office_id!r}")


class EmptyPoolError(ConfigurationError):
    def __init__(self, pool_name: str, client_id: str | None = None):
        self.pool_name = pool_name
        self.client_id = client_id
        message = f"Manager pool {pool_name!r} is empty"
        if client_id is not None:
            message += f" (while assigning client {client_id!r})"
        super().__init__(message)


class NoLocatedOfficesError(ConfigurationError):
    def __init__(self, client_id: str | None = None):
        self.client_id = client_id
        message = "No offices with known locations available"
        if client_id is not None:
            message += f" (while assigning client {client_id!r})"
        super().__init__(message)


class DuplicateOfficeError(ConfigurationError):
    def __init__(self, office_id: str, existing_id: str):
        self.office_id = office_id
        self.existing_id = existing_id
        message = f"Office {office_id!r} is listed more than once"
        if existing_id != office_id:
            message += f" (clashes with {existing_id!r})"
        super().__init__(message)
