"""
Smart Device Management API
https://developers.google.com/nest/device-access/reference/rest

Allow select enterprise partners to access, control, and manage Google and
Nest devices programmatically.  None of these resources carry transcoded
fields, device state is all in the free-form 'traits' dicts.
"""
from dataclasses import dataclass, field

from .client import GoogleApiClientBase, make_body, make_options, path_param
from .resources import GoogleResourceBase, resource_field

TRAIT_PREFIX = "sdm.devices.traits."

@dataclass
class ParentRelation(GoogleResourceBase):
    """
    Represents device relationships, for instance, structure/room to which the
    device is assigned to.
    """
    displayName: str|None = field(default=None)
    parent: str|None = field(default=None)

@dataclass
class Device(GoogleResourceBase):
    """
    https://developers.google.com/nest/device-access/reference/rest/v1/enterprises.devices
    """
    name: str|None = field(default=None)
    parentRelations: list[ParentRelation]|None = resource_field(ParentRelation, repeated=True)
    traits: dict|None = field(default=None)
    type: str|None = field(default=None)

    def __bool__(self) -> bool:
        return bool(self.name)

    def __str__(self) -> str:
        if self:
            return f"{self.name}:{self.type}"
        return "<empty>"

    def trait(self, name: str) -> dict|None:
        """
        Look up a trait by its full name or the short form, so
        'Temperature' finds 'sdm.devices.traits.Temperature'
        """
        if not self.traits:
            return None
        if name in self.traits:
            return self.traits[name]
        return self.traits.get(TRAIT_PREFIX + name, None)

@dataclass
class Room(GoogleResourceBase):
    """
    Room resource represents an instance of sub-space within a structure such as
    rooms in a hotel suite or rental apartment.
    """
    name: str|None = field(default=None)
    traits: dict|None = field(default=None)

@dataclass
class Structure(GoogleResourceBase):
    """
    Structure resource represents an instance of enterprise managed home or
    hotel room.
    """
    name: str|None = field(default=None)
    traits: dict|None = field(default=None)

@dataclass
class ExecuteDeviceCommandRequest(GoogleResourceBase):
    """
    command is the fully qualified command name, e.g.
    'sdm.devices.commands.ThermostatMode.SetMode'
    """
    command: str|None = field(default=None)
    params: dict|None = field(default=None)

@dataclass
class ExecuteDeviceCommandResponse(GoogleResourceBase):
    results: dict|None = field(default=None)

@dataclass
class ListDevicesResponse(GoogleResourceBase):
    devices: list[Device]|None = resource_field(Device, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class ListRoomsResponse(GoogleResourceBase):
    nextPageToken: str|None = field(default=None)
    rooms: list[Room]|None = resource_field(Room, repeated=True)

@dataclass
class ListStructuresResponse(GoogleResourceBase):
    nextPageToken: str|None = field(default=None)
    structures: list[Structure]|None = resource_field(Structure, repeated=True)

@dataclass(kw_only=True)
class EnterprisesDevicesListOptions(GoogleResourceBase):
    # filter on custom name substring, e.g. 'customName=wing'
    filter: str|None = field(default=None)
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)

@dataclass(kw_only=True)
class EnterprisesStructuresListOptions(GoogleResourceBase):
    filter: str|None = field(default=None)
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)

@dataclass(kw_only=True)
class EnterprisesStructuresRoomsListOptions(GoogleResourceBase):
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)

class SmartDeviceManagement(GoogleApiClientBase):
    """
    Client for the Smart Device Management API.
    Resource names are passed whole, e.g. 'enterprises/XYZ/devices/123'
    """
    _BASE_URL = "https://smartdevicemanagement.googleapis.com/"
    _SCOPES = ["sdm"]

    def enterprisesDevicesExecuteCommand(self, name: str,
                                         req: ExecuteDeviceCommandRequest|dict) -> ExecuteDeviceCommandResponse:
        """Executes a command to device managed by the enterprise."""
        body = make_body(ExecuteDeviceCommandRequest, req)
        data = self._request(f"v1/{path_param(name)}:executeCommand", "POST", body=body)
        return ExecuteDeviceCommandResponse.from_base(data)

    def enterprisesDevicesGet(self, name: str) -> Device:
        data = self._request(f"v1/{path_param(name)}")
        return Device.from_base(data)

    def enterprisesDevicesList(self, parent: str, **opts) -> ListDevicesResponse:
        """
        Lists devices managed by the enterprise.  parent is 'enterprises/XYZ'.
        opts: filter, pageSize, pageToken
        """
        options = make_options(EnterprisesDevicesListOptions, opts)
        data = self._request(f"v1/{path_param(parent)}/devices", options=options)
        return ListDevicesResponse.from_base(data)

    def enterprisesStructuresGet(self, name: str) -> Structure:
        data = self._request(f"v1/{path_param(name)}")
        return Structure.from_base(data)

    def enterprisesStructuresList(self, parent: str, **opts) -> ListStructuresResponse:
        """opts: filter, pageSize, pageToken"""
        options = make_options(EnterprisesStructuresListOptions, opts)
        data = self._request(f"v1/{path_param(parent)}/structures", options=options)
        return ListStructuresResponse.from_base(data)

    def enterprisesStructuresRoomsGet(self, name: str) -> Room:
        data = self._request(f"v1/{path_param(name)}")
        return Room.from_base(data)

    def enterprisesStructuresRoomsList(self, parent: str, **opts) -> ListRoomsResponse:
        """
        Lists rooms of a structure, parent is 'enterprises/XYZ/structures/ABC'.
        opts: pageSize, pageToken
        """
        options = make_options(EnterprisesStructuresRoomsListOptions, opts)
        data = self._request(f"v1/{path_param(parent)}/rooms", options=options)
        return ListRoomsResponse.from_base(data)
