from cssblocks.model.block import Block, State, StateInfo
from cssblocks.model.location import (
    SourceLocation,
    add_source_locations,
    selector_source_location,
)

__all__ = [
    "Block",
    "State",
    "StateInfo",
    "SourceLocation",
    "add_source_locations",
    "selector_source_location",
]
