import os
import logging
from typing import Dict, Any, Optional

# Import CadQuery-related libraries directly needed by the solid functions
import cadquery as cq
from cadquery import exporters

from .cube import Cube

log = logging.getLogger(__name__)


def build_solid(cube: Cube) -> cq.Workplane:
    """
    Builds a CadQuery box with the cube's edge length, centred on the origin.

    Raises:
        TypeError: If the object is not a Cube.
        ValueError: If the side length is not positive (the kernel cannot build it).
    """
    if not isinstance(cube, Cube): raise TypeError(f"Object to build is not a Cube, but {type(cube)}")
    length = cube.get_side_length()
    if not length > 0:
        raise ValueError(f"A solid needs a positive side length, got {length!r}")
    log.info(f"Building solid for {cube!r}")
    return cq.Workplane("XY").box(length, length, length)

def measure_solid(solid: Any) -> Dict[str, Any]:
    """
    Measures a CadQuery Shape or Workplane with the CAD kernel.

    Returns:
        A dictionary with 'volume', 'area' and 'bounding_box' (edge lengths
        and center).
    """
    shape = solid.val() if isinstance(solid, cq.Workplane) else solid
    if not isinstance(shape, cq.Shape):
        raise TypeError(f"Object to measure is not a cq.Shape or cq.Workplane, but {type(shape)}")
    bb = shape.BoundingBox()
    measurements = {
        'volume': shape.Volume(),
        'area': shape.Area(),
        'bounding_box': {
            'xlen': bb.xlen, 'ylen': bb.ylen, 'zlen': bb.zlen,
            'center': {'x': bb.center.x, 'y': bb.center.y, 'z': bb.center.z}
        },
    }
    log.debug(f"Measured solid: {measurements}")
    return measurements

def export_solid(cube: Cube, output_path: str, export_format: Optional[str] = None) -> str:
    """
    Exports the cube as a solid to a file (STEP, STL, SVG...).

    The format is inferred from the file extension unless given explicitly.

    Returns:
        The path written to.

    Raises:
        RuntimeError: If the export itself fails.
    """
    log.info(f"Exporting {cube!r} to file '{output_path}' (Format: {export_format or 'Infer'})")
    try:
        solid = build_solid(cube)
        output_dir = os.path.dirname(output_path)
        if output_dir: os.makedirs(output_dir, exist_ok=True)
        exporters.export(solid.val(), output_path, exportType=export_format)
    except (TypeError, ValueError):
        raise # Rejected before reaching the kernel
    except Exception as e:
        error_msg = f"Solid export to file '{output_path}' failed: {e}"
        log.error(error_msg, exc_info=True)
        raise RuntimeError(error_msg) from e
    log.info(f"Solid successfully exported to file '{output_path}'.")
    return output_path
