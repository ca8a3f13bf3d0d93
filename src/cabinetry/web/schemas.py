"""Request and response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    """Request body for generation and validation.

    ``config`` is a project file document (schema_version, modules,
    standards).
    """

    config: dict[str, Any] = Field(..., description="Project configuration")


class CutPanelSchema(BaseModel):
    seq: int
    module_name: str
    module_type: str
    zone: str
    part: str
    length_mm: int
    width_mm: int
    thickness_mm: float
    area_sqmm: int
    material: str
    qty: int
    edge_L1: bool
    edge_L2: bool
    edge_W1: bool
    edge_W2: bool


class DoorSpecSchema(BaseModel):
    module_name: str
    module_type: str
    zone: str
    door_no: str
    door_style: str
    open_type: str
    width_mm: float
    height_mm: float
    thickness_mm: float
    area_sqmm: int
    material: str
    finish: str


class HardwareItemSchema(BaseModel):
    module_name: str
    module_type: str
    zone: str
    item: str
    category: str
    qty: float
    unit: str
    rate: float
    estimated_cost: int


class MaterialGroupSchema(BaseModel):
    material: str
    thickness_mm: float
    panel_count: int
    total_area_sqmm: int
    total_area_sqft: float
    wastage_pct: int
    sheets_needed: int
    rate_per_sqft: float
    estimated_cost: int


class EdgeBandSchema(BaseModel):
    material: str
    thickness_mm: float
    total_running_mm: int
    total_running_ft: float
    wastage_pct: int
    rate_per_rft: float
    estimated_cost: int


class MaterialTakeoffSchema(BaseModel):
    items: list[MaterialGroupSchema]
    edge_band: EdgeBandSchema | None = None
    grand_total: int


class ScheduleOutputSchema(BaseModel):
    """All four schedules for one generate action."""

    project: str
    cut_list: list[CutPanelSchema]
    door_schedule: list[DoorSpecSchema]
    hardware_schedule: list[HardwareItemSchema]
    hardware_total: int
    material_takeoff: MaterialTakeoffSchema


class ValidationResultSchema(BaseModel):
    is_valid: bool
    errors: list[dict[str, Any]] = Field(default_factory=list)
    warnings: list[dict[str, Any]] = Field(default_factory=list)
