"""
Modèles SQLAlchemy / SQLAlchemy models.
Importer tous les modèles ici pour que create_all les détecte.
Import all models here so create_all can detect them.
"""

from fuel_tracker.models.user import User
from fuel_tracker.models.vehicle import Vehicle
from fuel_tracker.models.refueling import Refueling

__all__ = [
    "User",
    "Vehicle",
    "Refueling",
]
