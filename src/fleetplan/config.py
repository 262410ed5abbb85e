"""Application configuration and settings management."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="FLEETPLAN_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Fleet Assignment Planner"
    data_root: Path = Field(default=Path("data"), description="Root directory for datasets and plan outputs.")
    routes_file: Path = Field(
        default=Path("data/routes.csv"),
        description="Route dataset: route_id,source,destination,distance_km,toll.",
    )
    fleet_file: Path = Field(
        default=Path("data/fleet.csv"),
        description="Fleet dataset: vehicle_id,kind,name,driver_name,capacity_kg,mileage_km_per_l,fuel_rate.",
    )
    shipments_file: Path = Field(
        default=Path("data/shipments.csv"),
        description="Shipment dataset: shipment_id,weight_kg,distance_km,toll,cost_per_km_override.",
    )
    plan_file: Path = Field(default=Path("plan.txt"), description="Where the optimized plan text is written.")
    default_strategy: str = Field(default="fuel", description="Cost strategy used when none is requested.")
    driver_allowance_per_hour: float = Field(default=100.0, ge=0.0)
    average_speed_kmh: float = Field(default=50.0, gt=0.0)
    overweight_penalty: float = Field(default=1000.0, ge=0.0)
    legacy_vehicle_resolution: bool = Field(
        default=False,
        description="Assign the first feasible vehicle for the winning route instead of the cheapest one.",
    )
    log_level: str = Field(default="INFO")

    @field_validator("data_root", "routes_file", "fleet_file", "shipments_file", "plan_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        return str(value).strip().upper() or "INFO"


settings = Settings()
