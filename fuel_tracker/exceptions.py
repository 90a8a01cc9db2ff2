"""
Hierarchie d'erreurs metier / Domain error hierarchy.

Levees par les services, traduites en codes HTTP dans main.py.
Raised by services, translated to HTTP status codes in main.py.
"""


class FuelTrackerError(Exception):
    """Base de toutes les erreurs applicatives / Base for all application errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ResourceNotFoundError(FuelTrackerError):
    """Ressource absente ou non possedee par l'appelant / Resource missing or not owned by the caller."""


class DuplicateResourceError(FuelTrackerError):
    """Contrainte d'unicite violee / Uniqueness constraint violated."""


class AuthenticationError(FuelTrackerError):
    """Identifiants invalides / Invalid credentials."""
