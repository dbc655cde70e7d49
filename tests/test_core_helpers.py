import json
import math
import pytest

from cube_kitchen.core import get_cube_properties, get_cube_description
from cube_kitchen.cube import Cube
from cube_kitchen.models import CubeReport

# --- Tests for get_cube_properties ---

def test_get_cube_properties_basic():
    expected = {
        "side_length": 3,
        "surface_area": 54,
        "volume": 27,
    }
    assert get_cube_properties(Cube(3)) == expected

def test_get_cube_properties_negative_length():
    properties = get_cube_properties(Cube(-1))
    assert properties == {"side_length": -1, "surface_area": 6, "volume": -1}

def test_get_cube_properties_invalid_type():
    """Anything that is not a Cube is rejected before any arithmetic."""
    with pytest.raises(TypeError) as excinfo:
        get_cube_properties("not a cube")
    assert "Object to analyze is not a Cube" in str(excinfo.value)

def test_get_cube_properties_non_numeric_length():
    with pytest.raises(TypeError):
        get_cube_properties(Cube(None))

# --- Tests for get_cube_description ---

def test_get_cube_description_mentions_all_quantities():
    description = get_cube_description(Cube(4))
    assert "sides of 4 units" in description
    assert "surface area is 96 square units" in description
    assert "volume of 64 cubic units" in description
    assert "negative" not in description

def test_get_cube_description_flags_negative_length():
    description = get_cube_description(Cube(-2))
    assert "volume of -8 cubic units" in description
    assert "negative" in description

# --- Tests for CubeReport ---

def test_cube_report_from_cube():
    report = CubeReport.from_cube(Cube(5))
    assert report.side_length == 5
    assert report.surface_area == 150
    assert report.volume == 125
    assert report.delayed_value is None
    assert report.description == get_cube_description(Cube(5))

def test_cube_report_json_includes_delayed_value():
    report = CubeReport.from_cube(Cube(2), delayed_value=6)
    payload = json.loads(report.model_dump_json())
    assert payload["delayed_value"] == 6
    assert payload["volume"] == 8.0

def test_cube_report_schema_has_descriptions():
    schema = CubeReport.model_json_schema()
    assert set(schema["required"]) == {"side_length", "surface_area", "volume", "description"}
    assert schema["properties"]["volume"]["description"] == "Edge length cubed"

def test_cube_report_json_keeps_infinity():
    """Non-finite results pass through to the JSON output instead of turning into null."""
    payload = json.loads(CubeReport.from_cube(Cube(float("inf"))).model_dump_json())
    assert payload["side_length"] == float("inf")
    assert payload["surface_area"] == float("inf")
    assert payload["volume"] == float("inf")

def test_cube_report_json_keeps_nan():
    raw = CubeReport.from_cube(Cube(float("nan"))).model_dump_json()
    assert "null" not in raw
    payload = json.loads(raw)
    assert math.isnan(payload["volume"])
    assert math.isnan(payload["surface_area"])

def test_get_cube_description_complex_length():
    """Unorderable numbers are described without the negative-length remark."""
    description = get_cube_description(Cube(1j))
    assert "sides of 1j units" in description
    assert "negative" not in description
