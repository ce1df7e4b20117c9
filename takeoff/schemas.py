from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict, Literal

from .constants import DEFAULT_DIAMETER

DiameterClass = Literal["1/4", "5/16", "3/8", "1/2", "5/8"]
CalculatorKind = Literal["footing", "beam", "column", "slab", "masonry", "plaster"]


# --- Input rows ---
# Geometry fields are text, exactly as typed. Numbers sent by API clients are
# coerced to text here and parsed again by the calculators.

class TextFieldsModel(BaseModel):
    """
    Text fields take whatever the user typed. null or any non-text value is
    turned into text here, so the calculators parse it (blank reads as zero)
    instead of the row being rejected.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def _text_or_blank(cls, value, info):
        field = cls.model_fields[info.field_name]
        if field.annotation is str:
            if value is None:
                return ""
            if not isinstance(value, str):
                return str(value)
        elif value is None:
            return field.get_default(call_default_factory=True)
        return value


class RowBase(TextFieldsModel):
    floor: str = ""
    label: str = ""


class FootingRow(RowBase):
    count: str = "1"
    width_cm: str = ""
    length_cm: str = ""
    height_cm: str = ""
    horizontal_stirrups: str = ""
    vertical_stirrups: str = ""
    diameter: DiameterClass = DEFAULT_DIAMETER


class LinearMemberRow(RowBase):
    """Beam or column: rectangular cross-section extruded along a length."""
    count: str = "1"
    length_m: str = ""
    width_cm: str = ""
    height_cm: str = ""
    bar_quantity: str = ""
    diameter: DiameterClass = DEFAULT_DIAMETER


class BeamRow(LinearMemberRow):
    pass


class ColumnRow(LinearMemberRow):
    pass


class SlabRow(RowBase):
    slab_type: Literal["slab", "subfloor"] = "slab"
    thickness_cm: str = ""
    area_m2: str = ""


class MasonryRow(RowBase):
    area_m2: str = ""
    block_width_cm: str = ""
    block_height_cm: str = ""
    joint_cm: str = ""


class PlasterRow(RowBase):
    area_m2: str = ""
    thickness_cm: str = ""
    sides: str = "1"


class Vertex(TextFieldsModel):
    x: str = ""
    y: str = ""


# --- Computed rows ---

class ComputedFootingRow(FootingRow):
    unit_volume_m3: float = 0.0
    volume_m3: float = 0.0
    horizontal_bar_m: float = 0.0
    vertical_bar_m: float = 0.0
    linear_length_m: float = 0.0
    bar_count: float = 0.0
    cement_bags: float = 0.0
    sand_m3: float = 0.0
    gravel_m3: float = 0.0


class ComputedLinearMemberRow(LinearMemberRow):
    volume_m3: float = 0.0
    linear_length_m: float = 0.0
    bar_count: float = 0.0
    stirrup_linear_m: float = 0.0
    stirrup_bars: float = 0.0
    cement_bags: float = 0.0
    sand_m3: float = 0.0
    gravel_m3: float = 0.0


class ComputedSlabRow(SlabRow):
    volume_m3: float = 0.0
    cement_bags: float = 0.0
    sand_m3: float = 0.0
    gravel_m3: float = 0.0


class ComputedMasonryRow(MasonryRow):
    block_count: float = 0.0
    mortar_m3: float = 0.0
    cement_bags: float = 0.0
    sand_m3: float = 0.0


class ComputedPlasterRow(PlasterRow):
    effective_area_m2: float = 0.0
    mortar_m3: float = 0.0
    cement_bags: float = 0.0
    sand_m3: float = 0.0


# --- Totals ---

class Totals(BaseModel):
    """
    Per-calculator reduction of computed rows.

    Every field defaults to zero; a calculator only fills the ones it produces.
    Totals add field by field, so folding a row set in any partition gives
    the same result.
    """
    calculator: str = ""
    volume_m3: float = 0.0
    linear_length_m: float = 0.0
    cement_bags: float = 0.0
    sand_m3: float = 0.0
    gravel_m3: float = 0.0
    bars_by_diameter: Dict[str, float] = Field(default_factory=dict)
    stirrup_linear_m: float = 0.0
    stirrup_bars: float = 0.0
    block_count: float = 0.0
    mortar_m3: float = 0.0
    wall_area_m2: float = 0.0
    slab_area_m2: float = 0.0

    def __add__(self, other: "Totals") -> "Totals":
        bars = dict(self.bars_by_diameter)
        for diameter, count in other.bars_by_diameter.items():
            bars[diameter] = bars.get(diameter, 0.0) + count
        return Totals(
            calculator=self.calculator or other.calculator,
            volume_m3=self.volume_m3 + other.volume_m3,
            linear_length_m=self.linear_length_m + other.linear_length_m,
            cement_bags=self.cement_bags + other.cement_bags,
            sand_m3=self.sand_m3 + other.sand_m3,
            gravel_m3=self.gravel_m3 + other.gravel_m3,
            bars_by_diameter=bars,
            stirrup_linear_m=self.stirrup_linear_m + other.stirrup_linear_m,
            stirrup_bars=self.stirrup_bars + other.stirrup_bars,
            block_count=self.block_count + other.block_count,
            mortar_m3=self.mortar_m3 + other.mortar_m3,
            wall_area_m2=self.wall_area_m2 + other.wall_area_m2,
            slab_area_m2=self.slab_area_m2 + other.slab_area_m2,
        )


# --- Polygon ---

class ProjectedPoint(BaseModel):
    x: float
    y: float


class EdgeAnnotation(BaseModel):
    start: int
    end: int
    length: float
    label_x: float
    label_y: float


class Visualization(BaseModel):
    width: int
    height: int
    scale: float
    points: List[ProjectedPoint]
    edges: List[EdgeAnnotation]


class PolygonResult(BaseModel):
    area_m2: Optional[float] = None      # None = unavailable
    perimeter_m: Optional[float] = None
    visualization: Optional[Visualization] = None


# --- Consolidation ---

class ConsolidatedItem(BaseModel):
    name: str
    quantity: float
    unit: str
    category: Literal["volume", "bags", "count"]
    sources: List[str] = []


class ConsolidatedTotals(BaseModel):
    items: List[ConsolidatedItem] = []
    slab_area_m2: float = 0.0
    calculators: List[str] = []

    def get(self, name: str) -> float:
        """Quantity for a canonical item name, 0.0 when absent."""
        for item in self.items:
            if item.name == name:
                return item.quantity
        return 0.0


# --- Estimate request / result ---

class EstimateRequest(BaseModel):
    footing: List[FootingRow] = []
    beam: List[BeamRow] = []
    column: List[ColumnRow] = []
    slab: List[SlabRow] = []
    masonry: List[MasonryRow] = []
    plaster: List[PlasterRow] = []
    active: Optional[List[CalculatorKind]] = None   # None = every calculator
    floor: Optional[str] = None                     # None or sentinel = all floors
    parcel: Optional[List[Vertex]] = None


class CalculatorResult(BaseModel):
    kind: str
    rows: List[dict]
    totals: Totals


class EstimateResult(BaseModel):
    floor: Optional[str] = None
    floors: List[str] = []
    calculators: List[CalculatorResult] = []
    consolidated: ConsolidatedTotals
    parcel: Optional[PolygonResult] = None
