"""Placement palette shown in the bottom panel.

Clicking within PICK_RADIUS of an icon selects that kind for placement;
clicking anywhere else in the panel clears the selection.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from models import Point2D
from .entities import ObjectKind
from .geometry import squared_distance

PICK_RADIUS: float = 35.0


@dataclass(frozen=True)
class PaletteSlot:
    """One palette icon."""
    kind: ObjectKind
    x: float
    label: str


PALETTE_SLOTS: Tuple[PaletteSlot, ...] = (
    PaletteSlot(ObjectKind.OBSTACLE, 80.0, "Obstacle"),
    PaletteSlot(ObjectKind.COLLECTIBLE, 240.0, "Collectible"),
    PaletteSlot(ObjectKind.SPEED_POWERUP, 400.0, "Speed PU"),
    PaletteSlot(ObjectKind.SHIELD_POWERUP, 560.0, "Shield PU"),
)


def slot_center(slot: PaletteSlot, panel_height: float) -> Point2D:
    """Icon center in world coordinates (panel mid-height)."""
    return Point2D(x=slot.x, y=panel_height * 0.5)


def pick_slot(point: Point2D, panel_height: float) -> Optional[ObjectKind]:
    """Kind whose icon is under point, or None."""
    limit = PICK_RADIUS * PICK_RADIUS
    for slot in PALETTE_SLOTS:
        if squared_distance(point, slot_center(slot, panel_height)) < limit:
            return slot.kind
    return None


def label_for(kind: Optional[ObjectKind]) -> str:
    """HUD text for the current placement mode."""
    for slot in PALETTE_SLOTS:
        if slot.kind is kind:
            return f"Place: {slot.label}"
    return "Place: None"
