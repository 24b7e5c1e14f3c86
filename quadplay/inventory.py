"""Equipment slots and an item inventory with fit, unfit and refit commands."""

from __future__ import annotations

from dataclasses import dataclass, field

SLOT_LABELS = (
    "Left Mouse Button",
    "Right Mouse Button",
    "Middle Mouse Button",
    "Space",
    '"1"',
    '"2"',
    '"3"',
)


@dataclass
class Slot:
    """An equipment slot that holds at most one item."""

    id: int
    item: str | None = None


@dataclass(frozen=True)
class Unfit:
    """Remove the item from a slot."""

    target_slot: int


@dataclass(frozen=True)
class Fit:
    """Put an inventory item into a slot."""

    target_slot: int
    item: str


@dataclass(frozen=True)
class Refit:
    """Move an item from one slot to another."""

    target_slot: int
    origin_slot: int


FittingCommand = Unfit | Fit | Refit


def _default_slots() -> list[tuple[str, Slot]]:
    return [(label, Slot(index)) for index, label in enumerate(SLOT_LABELS)]


@dataclass
class Inventory:
    """Bought items plus labelled equipment slots."""

    items: list[str] = field(default_factory=list)
    slots: list[tuple[str, Slot]] = field(default_factory=_default_slots)

    def buy(self, index) -> str:
        """Add shop item ``index`` to the inventory and return its name."""
        item = f"Item {index}"
        self.items.append(item)
        return item

    def slot(self, slot_id: int) -> Slot | None:
        """The slot with the given id, if there is one."""
        return next((slot for _, slot in self.slots if slot.id == slot_id), None)

    def set_item(self, slot_id, item) -> None:
        """Put ``item`` (or nothing) into a slot; unknown ids are ignored."""
        slot = self.slot(slot_id)
        if slot is not None:
            slot.item = item

    def apply(self, command) -> None:
        """Carry out a fitting command."""
        match command:
            case Unfit(target_slot=target):
                self.set_item(target, None)
            case Fit(target_slot=target, item=item):
                self.set_item(target, item)
            case Refit(target_slot=target, origin_slot=origin):
                origin_slot = self.slot(origin)
                origin_item = origin_slot.item if origin_slot is not None else None
                self.set_item(target, origin_item)
                self.set_item(origin, None)
            case _:
                raise TypeError(f"unknown fitting command: {command!r}")