"""
Purpose:
- Pydantic models for the model reply and the /upload payloads.
- `decode_reply` turns cleaned reply text into one of two variants:
  VehicleIdentified or VehicleNotFound.

Notes:
- Vehicle fields are whatever the model produced. No type coercion, no
  required fields; extra keys pass through untouched.
"""

from __future__ import annotations
import json
from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from ..core.errors import ReplyFormatError

class VehicleRecord(BaseModel):
    model_config = ConfigDict(extra="allow", protected_namespaces=())

    manufacturer: Optional[Any] = None
    model: Optional[Any] = None
    color: Optional[Any] = None
    year: Optional[Any] = Field(default=None, description='"YYYY" or "YYYY-YYYY"')
    # best-effort: rarely real image data
    logo: Optional[Any] = None
    fuel_type: Optional[Any] = None
    fuel_efficiency_kmpl: Optional[Any] = None
    max_speed_kmph: Optional[Any] = None
    manufacturer_country: Optional[Any] = None
    years_of_production: Optional[Any] = None
    horsepower: Optional[Any] = None

    def as_payload(self) -> dict:
        # only what the model actually sent
        return self.model_dump(exclude_unset=True)

class VehicleIdentified(BaseModel):
    vehicle: VehicleRecord

class VehicleNotFound(BaseModel):
    error: str

ModelReply = Union[VehicleIdentified, VehicleNotFound]

class CarInfo(BaseModel):
    vehicle: dict
    imageBase64: str

class CarInfoResponse(BaseModel):
    carInfo: CarInfo

class ErrorResponse(BaseModel):
    error: str

def _reject_constant(token: str):
    # NaN / Infinity / -Infinity are not JSON
    raise ValueError(f"invalid JSON constant {token!r}")

def decode_reply(text: str) -> ModelReply:
    """
    Parse cleaned reply text. An `error` key wins over `vehicle`.
    Raises ValueError (json.JSONDecodeError included) on anything that is
    not strict JSON and ReplyFormatError on any other shape.
    """
    data = json.loads(text, parse_constant=_reject_constant)
    if not isinstance(data, dict):
        raise ReplyFormatError(detail=f"reply is a JSON {type(data).__name__}, expected object")

    err = data.get("error")
    if err:
        # non-string errors are relayed as their JSON text
        msg = err if isinstance(err, str) else json.dumps(err)
        return VehicleNotFound(error=msg)

    vehicle = data.get("vehicle")
    if isinstance(vehicle, dict):
        return VehicleIdentified(vehicle=VehicleRecord.model_validate(vehicle))

    raise ReplyFormatError(detail=f"reply has neither 'error' nor 'vehicle': keys={sorted(data)}")
