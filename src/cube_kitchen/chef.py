from typing import Sequence, Tuple

# Fixed menu of the stand-in collaborator used by the demo scenarios
DEFAULT_DISHES: Tuple[str, ...] = (
    "Tomato Soup",
    "Grilled Cheese",
    "Caesar Salad",
    "Spaghetti Bolognese",
)
DEFAULT_SPECIAL = "Spaghetti Bolognese"


class Chef:
    """A kitchen stand-in with a fixed menu. Nothing here touches the cube."""

    def __init__(self, dishes: Sequence[str] = DEFAULT_DISHES, special: str = DEFAULT_SPECIAL):
        self.dishes: Tuple[str, ...] = tuple(dishes)
        self._special = special

    def check_menu(self) -> str:
        """Returns the dish the chef has chosen to cook."""
        return self._special


# Shared instance, consumers use this rather than constructing their own
chef = Chef()
