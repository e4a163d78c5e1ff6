"""
Pin facade over the host minimap.

Centralizes pin creation, removal and lookup so game logic does not deal
with the host store or custom icon resolution directly.
"""

import logging
from typing import Callable, List, Optional

from ..icons.models import PinningTarget
from ..icons.resolver import IconResolver
from .host import MinimapHost
from .models import PinData, Vector3, distance_xz

PinPredicate = Callable[[PinData], bool]


class PinManager:
    """Adds, removes and finds pins on the host minimap."""

    def __init__(self, host: MinimapHost, resolver: IconResolver):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.host = host
        self.resolver = resolver

    @property
    def pins(self) -> List[PinData]:
        """Live pin collection, in host order."""
        return self.host.get_pins()

    def add_pin(self, pos: Vector3, pin_type: int, name: str, save: bool) -> PinData:
        """Create a pin with an explicit icon type."""
        pin = self.host.add_pin(pos, pin_type, name, save)
        self.logger.debug(f"Add pin: [name: {name}, pos: {tuple(pin.pos)}, icon: {int(pin_type)}]")
        return pin

    def add_pin_for_target(
        self, pos: Vector3, target: PinningTarget, name: str, save: bool
    ) -> PinData:
        """Create a pin whose icon is resolved from target.

        The pin name is left empty when the resolved icon hides name tags.
        """
        icon = self.resolver.resolve(target)
        if icon.options.hide_name_tag:
            name = ""
        return self.add_pin(pos, icon.pin_type, name, save)

    def remove_pin(self, pin: PinData) -> None:
        """Remove a pin by identity."""
        self.host.remove_pin(pin)
        self.logger.debug(f"Remove pin: [name: {pin.name}, pos: {tuple(pin.pos)}, icon: {int(pin.type)}]")

    def remove_pin_at(self, pos: Vector3, save: bool = True) -> bool:
        """Remove the first pin exactly at pos whose save flag equals save.

        Returns:
            True if a pin was removed
        """
        pin = self.find_pin(lambda p: p.save == save and tuple(p.pos) == tuple(pos))
        if pin is None:
            return False
        self.remove_pin(pin)
        return True

    def find_pin(self, predicate: PinPredicate) -> Optional[PinData]:
        """Return the first pin satisfying predicate, or None."""
        return next((pin for pin in self.pins if predicate(pin)), None)

    def find_pin_in_range(self, pos: Vector3, radius: float) -> Optional[PinData]:
        """Return the first pin within radius of pos on the horizontal plane."""
        return self.find_pin(lambda p: distance_xz(p.pos, pos) <= radius)

    def have_pin_in_range(self, pos: Vector3, radius: float) -> bool:
        """Check whether any pin lies within radius of pos on the horizontal plane."""
        return self.find_pin_in_range(pos, radius) is not None
