"""Per-frame bookkeeping shared by the application and the renderer."""

from dataclasses import dataclass


@dataclass
class PerFrameData:
    """Index of the current frame and whether it is catching up on lost time."""

    frame_index: int = 0
    is_catch_up_phase: bool = False