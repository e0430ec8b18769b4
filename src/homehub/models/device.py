"""Device models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field, model_validator

from .base import Entity


class DeviceCategory(str, Enum):
    LIGHTING = "lighting"
    CLIMATE = "climate"
    SECURITY = "security"
    APPLIANCES = "appliances"
    OTHER = "other"


class Protocol(str, Enum):
    ZIGBEE = "zigbee3"
    ZWAVE = "zwave_plus"
    MATTER = "matter_thread"
    WIFI = "wifi6"
    BLE = "bluetooth_le"


class Device(Entity):
    """Smart-home device as held by the inventory.

    ``energy_usage`` is zero exactly when the device is off. A device built
    "on" without a reading draws its ``nominal_power``.
    """

    category: DeviceCategory = DeviceCategory.OTHER
    brand: str = ""
    room: str = ""
    protocol: Protocol = Protocol.WIFI
    status: bool = False
    battery: int | None = Field(default=None, ge=0, le=100)
    temperature: float | None = None
    firmware_version: str = ""
    ip_address: str | None = None
    energy_usage: float = Field(default=0.0, ge=0)
    nominal_power: float = Field(default=10.0, gt=0)

    @model_validator(mode="after")
    def _sync_energy_with_status(self) -> Device:
        if not self.status:
            self.energy_usage = 0.0
        elif self.energy_usage == 0:
            self.energy_usage = self.nominal_power
        return self

    def power_on(self, now: datetime) -> None:
        self.status = True
        self.energy_usage = self.nominal_power
        self.last_seen = now

    def power_off(self, now: datetime) -> None:
        self.status = False
        self.energy_usage = 0.0
        self.last_seen = now
