"""Custom exceptions for the layout context."""

from typing import Optional


class LayoutContractError(ValueError):
    """
    Exception raised when a caller hands the engine structurally invalid input.

    These indicate a broken caller contract (e.g., blocks=None or a non-Section
    entry in the section list), not bad user data, so they fail fast.

    Attributes:
        message: Error description
        section_index: Index of the offending section, if known
        block_index: Index of the offending block within its section, if known
    """

    def __init__(
        self,
        message: str,
        section_index: Optional[int] = None,
        block_index: Optional[int] = None,
    ):
        self.message = message
        self.section_index = section_index
        self.block_index = block_index

        location = []
        if section_index is not None:
            location.append(f"section {section_index}")
        if block_index is not None:
            location.append(f"block {block_index}")

        full_message = message
        if location:
            full_message = f"{message} (at {', '.join(location)})"

        super().__init__(full_message)


class InvalidGeometryError(ValueError):
    """
    Exception raised when page dimensions leave no usable content area.

    Attributes:
        message: Error description
        width: Page width in points
        height: Page height in points
    """

    def __init__(self, message: str, width: float, height: float):
        self.message = message
        self.width = width
        self.height = height
        super().__init__(f"{message} (page {width:g} x {height:g} pt)")
