"""Deduction, default and wastage constants for schedule generation.

This module provides:
- Built-in fallbacks used when the standards catalog is silent
- Clearance deductions for carcass, shelf, back panel and drawer parts
- Door gap and overlap allowances
- Hardware rule thresholds
- Sheet size and wastage factors for the material takeoff

All lengths are millimeters.
"""

from __future__ import annotations


# --- Built-in fallbacks ---

DEFAULT_CARCASS_THICKNESS = 18.0
DEFAULT_BACK_PANEL_THICKNESS = 6.0
DEFAULT_SHUTTER_THICKNESS = 18.0
DEFAULT_EDGE_BAND_THICKNESS = 1.0

DEFAULT_CARCASS_MATERIAL = "HDHMR 18mm"
DEFAULT_BACK_PANEL_MATERIAL = "MR Ply 6mm"
DEFAULT_SHUTTER_MATERIAL = "Ply + Laminate"
DEFAULT_SHUTTER_FINISH = "Laminate"
DEFAULT_EDGE_BAND_MATERIAL = "PVC Edge Band"


# --- Cut list clearances ---

# Routing allowance added to the back panel thickness when it is recessed
BACK_PANEL_RECESS_ALLOWANCE = 6.0

SHELF_LENGTH_CLEARANCE = 2.0
SHELF_DEPTH_CLEARANCE = 10.0

# A recessed back panel is cut oversize to seat in its groove
BACK_PANEL_GROOVE_OVERSIZE = 12.0

DRAWER_FRONT_CLEARANCE = 4.0
DRAWER_BOX_CLEARANCE = 30.0  # runner and top clearance
DRAWER_WIDTH_CLEARANCE = 2.0
DRAWER_DEPTH_CLEARANCE = 60.0  # handle and front clearance


# --- Door schedule ---

DOOR_GAP_TOTAL = 4.0  # across the full width, and across the full height
SLIDING_DOOR_OVERLAP = 20.0


# --- Hardware rules ---

# Door height -> hinges per door. Heights above the last band use the max.
HINGE_HEIGHT_BANDS: tuple[tuple[float, int], ...] = (
    (1000.0, 2),
    (1500.0, 3),
)
HINGES_EXTRA_TALL = 4

TELESCOPIC_CHANNEL_MIN_DEPTH = 450.0  # strictly deeper gets telescopic
FLAP_STAYS_PER_DOOR = 2
SHELF_PINS_PER_SHELF = 4
BASE_MODULE_LEGS = 4


# --- Material takeoff ---

SHEET_LENGTH_MM = 2440.0
SHEET_WIDTH_MM = 1220.0
SHEET_AREA_SQMM = SHEET_LENGTH_MM * SHEET_WIDTH_MM  # 8x4 ft board

SHEET_WASTAGE_PCT = 8
EDGE_BAND_WASTAGE_PCT = 10
