from datetime import date as date_type
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


_TIME_PATTERN = re.compile(r'^([01]\d|2[0-3]):[0-5]\d$')


def _require_text(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError('This field is required')
    return v


def _validate_iso_date(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    if not v:
        return None
    try:
        date_type.fromisoformat(v)
    except ValueError:
        raise ValueError('Date must be in YYYY-MM-DD format')
    if len(v) != 10:
        raise ValueError('Date must be in YYYY-MM-DD format')
    return v


class CatalogForm(BaseModel):
    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class RouteSearchQuery(BaseModel):
    origin: Optional[str] = None
    destination: Optional[str] = None
    date: Optional[str] = None
    min_seats: Optional[int] = Field(default=None, ge=1)

    @field_validator('origin', 'destination')
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    @field_validator('date')
    @classmethod
    def validate_date(cls, v: Optional[str]) -> Optional[str]:
        return _validate_iso_date(v)


class CompanyForm(CatalogForm):
    name: str
    phone: str
    email: str
    address: Optional[str] = None
    description: Optional[str] = None
    status: str = 'active'

    @field_validator('name', 'phone')
    @classmethod
    def validate_required(cls, v: str) -> str:
        return _require_text(v)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip()
        if '@' not in v:
            raise ValueError('Enter a valid email address')
        return v

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'TransAndina',
                'phone': '+51 999 888 777',
                'email': 'info@transandina.com',
            }
        }


class BusForm(CatalogForm):
    company_id: str
    plate_number: str
    capacity: int = Field(gt=0)
    model: str
    status: str = 'active'
    features: List[str] = []
    year: Optional[int] = Field(default=None, ge=1950)
    mileage: int = Field(default=0, ge=0)

    @field_validator('company_id', 'plate_number', 'model')
    @classmethod
    def validate_required(cls, v: str) -> str:
        return _require_text(v)

    class Config:
        json_schema_extra = {
            'example': {
                'company_id': '1',
                'plate_number': 'ABC-123',
                'capacity': 40,
                'model': 'Mercedes Benz',
            }
        }


class RouteForm(CatalogForm):
    company_id: str
    origin: str
    destination: str
    price: float = Field(gt=0)
    duration: str
    status: str = 'active'
    distance_km: Optional[float] = Field(default=None, gt=0)
    description: Optional[str] = None

    @field_validator('company_id', 'origin', 'destination', 'duration')
    @classmethod
    def validate_required(cls, v: str) -> str:
        return _require_text(v)

    @model_validator(mode='after')
    def validate_distinct_endpoints(self) -> 'RouteForm':
        if self.origin.lower() == self.destination.lower():
            raise ValueError('Origin and destination must be different')
        return self

    class Config:
        json_schema_extra = {
            'example': {
                'company_id': '1',
                'origin': 'Lima',
                'destination': 'Cusco',
                'price': 80,
                'duration': '22h',
            }
        }


class ScheduleForm(CatalogForm):
    route_id: str
    bus_id: str
    departure_time: str
    arrival_time: str
    date: str
    available_seats: int = Field(ge=0)
    total_capacity: int = Field(gt=0)
    status: str = 'scheduled'

    @field_validator('route_id', 'bus_id')
    @classmethod
    def validate_required(cls, v: str) -> str:
        return _require_text(v)

    @field_validator('departure_time', 'arrival_time')
    @classmethod
    def validate_time(cls, v: str) -> str:
        v = v.strip()
        if not _TIME_PATTERN.match(v):
            raise ValueError('Time must be in HH:MM format')
        return v

    @field_validator('date')
    @classmethod
    def validate_date(cls, v: str) -> str:
        checked = _validate_iso_date(v)
        if checked is None:
            raise ValueError('This field is required')
        return checked

    @model_validator(mode='after')
    def validate_seat_counts(self) -> 'ScheduleForm':
        if self.available_seats > self.total_capacity:
            raise ValueError('Available seats cannot exceed total capacity')
        return self

    class Config:
        json_schema_extra = {
            'example': {
                'route_id': '1',
                'bus_id': '1',
                'departure_time': '20:00',
                'arrival_time': '18:00',
                'date': '2025-01-15',
                'available_seats': 38,
                'total_capacity': 40,
            }
        }


class UserUpdateForm(CatalogForm):
    name: str
    email: str
    role: str = 'user'
    is_active: bool = True

    @field_validator('name')
    @classmethod
    def validate_required(cls, v: str) -> str:
        return _require_text(v)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip()
        if '@' not in v:
            raise ValueError('Enter a valid email address')
        return v

    @field_validator('role')
    @classmethod
    def validate_role(cls, v: str) -> str:
        if v not in ('admin', 'user'):
            raise ValueError('Role must be admin or user')
        return v
