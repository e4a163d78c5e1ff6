"""
Host minimap adapters.

`MinimapHost` is the narrow interface through which the registry and the pin
facade reach host internals. `InMemoryMinimap` is a self-contained host used
by the preview tool and tests; `ReflectiveMinimapAdapter` reads and writes
named attributes of a live host object.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from ..errors import HostUnavailableError, RegistrationError
from .models import PinData, PinType, SpriteData, Vector3


class MinimapHost(ABC):
    """Capabilities consumed from the host minimap."""

    @abstractmethod
    def get_pins(self) -> List[PinData]:
        """Return the live, ordered pin collection."""

    @abstractmethod
    def get_visibility_table(self) -> List[bool]:
        """Return the per-icon-type visibility table."""

    @abstractmethod
    def set_visibility_table(self, table: List[bool]) -> None:
        """Replace the per-icon-type visibility table."""

    @abstractmethod
    def add_sprite(self, pin_type: int, sprite: Any) -> None:
        """Map an icon type to a sprite for rendering."""

    @abstractmethod
    def add_pin(self, pos: Vector3, pin_type: int, name: str, save: bool) -> PinData:
        """Create a pin and append it to the pin collection."""

    @abstractmethod
    def remove_pin(self, pin: PinData) -> None:
        """Remove a pin by identity."""

    def ensure_ready(self) -> None:
        """Check that every host structure used for registration is reachable.

        Raises:
            RegistrationError: If a host structure is missing or malformed
        """


class InMemoryMinimap(MinimapHost):
    """Minimap host that keeps everything in plain Python lists.

    Starts with one visible slot per built-in `PinType`.
    """

    def __init__(self, visibility: Optional[List[bool]] = None):
        self.pins: List[PinData] = []
        self.visible_icon_types: List[bool] = (
            list(visibility) if visibility is not None else [True] * len(PinType)
        )
        self.icons: List[SpriteData] = []

    def get_pins(self) -> List[PinData]:
        return self.pins

    def get_visibility_table(self) -> List[bool]:
        return self.visible_icon_types

    def set_visibility_table(self, table: List[bool]) -> None:
        self.visible_icon_types = list(table)

    def add_sprite(self, pin_type: int, sprite: Any) -> None:
        self.icons.append(SpriteData(name=pin_type, icon=sprite))

    def get_sprite(self, pin_type: int) -> Any:
        """Return the sprite registered for an icon type, or None."""
        for data in self.icons:
            if data.name == pin_type:
                return data.icon
        return None

    def add_pin(self, pos: Vector3, pin_type: int, name: str, save: bool) -> PinData:
        pin = PinData(pos=Vector3(*pos), type=pin_type, name=name, save=save)
        self.pins.append(pin)
        return pin

    def remove_pin(self, pin: PinData) -> None:
        # Identity, not equality
        for index, candidate in enumerate(self.pins):
            if candidate is pin:
                del self.pins[index]
                return


class ReflectiveMinimapAdapter(MinimapHost):
    """Adapter over a live host object reached by attribute names.

    host_provider returns the current host instance (or None while the host
    is not running). Private host state is read and written with
    getattr/setattr; pin creation and removal call the host's own methods.
    """

    def __init__(
        self,
        host_provider: Callable[[], Any],
        pins_field: str = "m_pins",
        visibility_field: str = "m_visibleIconTypes",
        icons_field: str = "m_icons",
        add_pin_method: str = "add_pin",
        remove_pin_method: str = "remove_pin",
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.host_provider = host_provider
        self.pins_field = pins_field
        self.visibility_field = visibility_field
        self.icons_field = icons_field
        self.add_pin_method = add_pin_method
        self.remove_pin_method = remove_pin_method

    def _host(self) -> Any:
        host = self.host_provider()
        if host is None:
            raise HostUnavailableError("Host minimap instance is not available")
        return host

    def _get_field(self, name: str) -> Any:
        host = self._host()
        try:
            return getattr(host, name)
        except AttributeError as e:
            raise HostUnavailableError(
                f"Host minimap has no field '{name}'"
            ) from e

    def _get_method(self, name: str) -> Callable[..., Any]:
        method = self._get_field(name)
        if not callable(method):
            raise HostUnavailableError(f"Host minimap member '{name}' is not callable")
        return method

    def get_pins(self) -> List[PinData]:
        return self._get_field(self.pins_field)

    def get_visibility_table(self) -> List[bool]:
        table = self._get_field(self.visibility_field)
        if not isinstance(table, (list, tuple)):
            raise RegistrationError(
                f"Host field '{self.visibility_field}' is {type(table).__name__}, expected a list"
            )
        return list(table)

    def set_visibility_table(self, table: List[bool]) -> None:
        setattr(self._host(), self.visibility_field, list(table))
        self.logger.debug(f"Host field '{self.visibility_field}' replaced ({len(table)} slots)")

    def _get_icons(self) -> List[SpriteData]:
        icons = self._get_field(self.icons_field)
        if not isinstance(icons, list):
            raise RegistrationError(
                f"Host field '{self.icons_field}' is {type(icons).__name__}, expected a list"
            )
        return icons

    def ensure_ready(self) -> None:
        self.get_visibility_table()
        self._get_icons()

    def add_sprite(self, pin_type: int, sprite: Any) -> None:
        self._get_icons().append(SpriteData(name=pin_type, icon=sprite))

    def add_pin(self, pos: Vector3, pin_type: int, name: str, save: bool) -> PinData:
        return self._get_method(self.add_pin_method)(pos, pin_type, name, save, False)

    def remove_pin(self, pin: PinData) -> None:
        self._get_method(self.remove_pin_method)(pin)
