"""
Base des schemas / Schema base.
Cles JSON en camelCase, noms Python en snake_case.
camelCase JSON keys, snake_case Python names.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def naive(value: datetime | None) -> datetime | None:
    """Retirer le fuseau sans conversion / Drop the offset without converting."""
    if value is not None and value.tzinfo is not None:
        return value.replace(tzinfo=None)
    return value


def reject_null(value):
    """Champ omissible mais non annulable / Field may be omitted but not set to null."""
    if value is None:
        raise ValueError("field may be omitted but not set to null")
    return value
