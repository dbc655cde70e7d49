from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .core import get_cube_properties, get_cube_description
from .cube import Cube


class CubeReport(BaseModel):
    # Lengths are unvalidated, keep inf/nan as JSON constants rather than null
    model_config = ConfigDict(ser_json_inf_nan="constants")

    side_length: float = Field(..., description="Edge length of the cube")
    surface_area: float = Field(..., description="Total area of the six faces")
    volume: float = Field(..., description="Edge length cubed")
    description: str = Field(..., description="Human-readable summary")
    delayed_value: Optional[int] = Field(None, description="Result of the deferred computation, if it was awaited")

    @classmethod
    def from_cube(cls, cube: Cube, delayed_value: Optional[int] = None) -> "CubeReport":
        """Builds a report from the cube's derived quantities."""
        return cls(
            **get_cube_properties(cube),
            description=get_cube_description(cube),
            delayed_value=delayed_value,
        )
