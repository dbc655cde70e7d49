import logging
import numbers
from typing import Dict, Any

from .cube import Cube

log = logging.getLogger(__name__) # Use standard logging

# --- Core Logic Functions ---

def get_cube_properties(cube: Any) -> Dict[str, Any]:
    """
    Collects the derived quantities of a Cube.

    Args:
        cube: The Cube to analyze.

    Returns:
        A dictionary with 'side_length', 'surface_area' and 'volume'.

    Raises:
        TypeError: If the object is not a Cube, or its length does not
            support arithmetic.
    """
    if not isinstance(cube, Cube):
        raise TypeError(f"Object to analyze is not a Cube, but {type(cube)}")

    log.info(f"Calculating properties for {cube!r}")
    try:
        properties = {
            'side_length': cube.get_side_length(),
            'surface_area': cube.get_surface_area(),
            'volume': cube.get_volume(),
        }
    except TypeError as e:
        log.error(f"Property calculation failed for {cube!r}: {e}", exc_info=True)
        raise
    log.debug(f"Calculated properties: {properties}")
    return properties

def get_cube_description(cube: Any) -> str:
    """
    Generates a textual description of a Cube from its properties.

    Raises:
        TypeError: If the object is not a Cube.
    """
    properties = get_cube_properties(cube)
    description_parts = [
        f"The object is a cube with sides of {properties['side_length']} units.",
        f"The total surface area is {properties['surface_area']} square units.",
        f"It has a volume of {properties['volume']} cubic units.",
    ]
    # Lengths are never validated, flag the odd ones in the text instead
    side_length = properties['side_length']
    if isinstance(side_length, numbers.Real) and side_length < 0:
        description_parts.append("Its side length is negative, so the figures are not physical.")
    return " ".join(description_parts)
