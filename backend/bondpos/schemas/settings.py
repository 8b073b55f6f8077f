"""Business settings schemas.

Both schemas are derived from the ``business_settings`` table so the wire
format tracks the model's columns.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import create_model

from bondpos.models import BusinessSettings
from bondpos.schemas.base import CamelModel

_columns = [column for column in BusinessSettings.__table__.columns if column.key != "pk"]


def _response_fields() -> Dict[str, Tuple[Any, Any]]:
    result = {}
    for column in _columns:
        python_type = column.type.python_type
        if column.nullable:
            result[column.key] = (Optional[python_type], None)
        else:
            result[column.key] = (python_type, ...)
    return result


def _update_fields() -> Dict[str, Tuple[Any, Any]]:
    return {
        column.key: (Optional[column.type.python_type], None)
        for column in _columns
        if column.key not in ("id", "updated_at")
    }


SettingsResponse = create_model("SettingsResponse", __base__=CamelModel, **_response_fields())
SettingsResponse.__doc__ = "Business settings singleton."

# Partial update: only fields present in the request body are applied
SettingsUpdate = create_model("SettingsUpdate", __base__=CamelModel, **_update_fields())
