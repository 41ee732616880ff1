"""Client errors."""


class ClientError(Exception):
    """Base error for the functions client."""

    def __init__(self, message: str = "Client error"):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(ClientError):
    """Required configuration is missing."""


class ApiStatusError(ClientError):
    """Endpoint answered with a non-2xx status.

    ``body`` is the best-effort response text, or ``None`` when the
    endpoint does not report it.
    """

    def __init__(self, tag: str, status_code: int, body: str | None = None):
        self.tag = tag
        self.status_code = status_code
        self.body = body
        message = f"{tag} {status_code}" if body is None else f"{tag} {status_code}: {body}"
        super().__init__(message)


class MissingIdentifierError(ClientError):
    """User creation succeeded but the response carries no identifier."""

    def __init__(self, message: str = "Réponse inattendue (id manquant)"):
        super().__init__(message)
