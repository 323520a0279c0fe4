"""
My Business Place Actions API
https://developers.google.com/my-business/reference/placeactions/rest

Managing place action links (booking, ordering, ... links) of a location on Google.
"""
from dataclasses import dataclass, field
import datetime

from .client import GoogleApiClientBase, NO_CONTENT, make_body, make_options, path_param
from .resources import GoogleResourceBase, resource_field, timestamp_field

PLACE_ACTION_TYPES = ["PLACE_ACTION_TYPE_UNSPECIFIED", "APPOINTMENT", "ONLINE_APPOINTMENT",
                      "DINING_RESERVATION", "FOOD_ORDERING", "FOOD_DELIVERY", "FOOD_TAKEOUT",
                      "SHOP_ONLINE"]

def _check_body(body: dict) -> dict:
    # only what is sent is checked, the server may add types this list lacks
    t = body.get("placeActionType")
    if t is not None and t not in PLACE_ACTION_TYPES:
        raise ValueError(f"Invalid place action type: {t}")
    return body

@dataclass
class PlaceActionLink(GoogleResourceBase):
    """
    https://developers.google.com/my-business/reference/placeactions/rest/v1/locations.placeActionLinks
    createTime, updateTime, isEditable and providerType are output only.
    """
    createTime: datetime.datetime|str|None = timestamp_field()
    isEditable: bool|None = field(default=None)
    isPreferred: bool|None = field(default=None)
    name: str|None = field(default=None)
    placeActionType: str|None = field(default=None)
    providerType: str|None = field(default=None)
    updateTime: datetime.datetime|str|None = timestamp_field()
    uri: str|None = field(default=None)

    def __bool__(self) -> bool:
        return bool(self.name)

    def __str__(self) -> str:
        if self:
            return f"{self.name}<{self.placeActionType}:{self.uri}>"
        return "<empty>"

@dataclass
class PlaceActionTypeMetadata(GoogleResourceBase):
    displayName: str|None = field(default=None)
    placeActionType: str|None = field(default=None)

@dataclass
class ListPlaceActionLinksResponse(GoogleResourceBase):
    nextPageToken: str|None = field(default=None)
    placeActionLinks: list[PlaceActionLink]|None = resource_field(PlaceActionLink, repeated=True)

@dataclass
class ListPlaceActionTypeMetadataResponse(GoogleResourceBase):
    nextPageToken: str|None = field(default=None)
    placeActionTypeMetadata: list[PlaceActionTypeMetadata]|None = resource_field(PlaceActionTypeMetadata, repeated=True)

@dataclass(kw_only=True)
class LocationsPlaceActionLinksListOptions(GoogleResourceBase):
    # only 'place_action_type=XYZ' is supported
    filter: str|None = field(default=None)
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)

@dataclass(kw_only=True)
class LocationsPlaceActionLinksPatchOptions(GoogleResourceBase):
    """
    updateMask is a FieldMask, either the comma separated string or a list of
    field names.  Only uri, place_action_type and is_preferred are editable.
    """
    updateMask: str|list[str]|None = field(default=None)

@dataclass(kw_only=True)
class PlaceActionTypeMetadataListOptions(GoogleResourceBase):
    # 'location=locations/{location_id}' or 'region_code=XYZ'
    filter: str|None = field(default=None)
    languageCode: str|None = field(default=None)
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)

class MyBusinessPlaceActions(GoogleApiClientBase):
    """
    Client for the My Business Place Actions API.
    Note - If you have a quota of 0 after enabling the API, please request for GBP API access.
    """
    _BASE_URL = "https://mybusinessplaceactions.googleapis.com/"
    _SCOPES = ["business"]

    def locationsPlaceActionLinksCreate(self, parent: str, req: PlaceActionLink|dict) -> PlaceActionLink:
        """
        Creates a place action link on the location 'locations/{location_id}'.
        The request is considered duplicate if the parent, uri and
        placeActionType are the same as a previous request.
        """
        body = _check_body(make_body(PlaceActionLink, req))
        data = self._request(f"v1/{path_param(parent)}/placeActionLinks", "POST", body=body)
        return PlaceActionLink.from_base(data)

    def locationsPlaceActionLinksDelete(self, name: str) -> None:
        self._request(f"v1/{path_param(name)}", "DELETE", response=NO_CONTENT)

    def locationsPlaceActionLinksGet(self, name: str) -> PlaceActionLink:
        data = self._request(f"v1/{path_param(name)}")
        return PlaceActionLink.from_base(data)

    def locationsPlaceActionLinksList(self, parent: str, **opts) -> ListPlaceActionLinksResponse:
        """opts: filter, pageSize, pageToken"""
        options = make_options(LocationsPlaceActionLinksListOptions, opts)
        data = self._request(f"v1/{path_param(parent)}/placeActionLinks", options=options)
        return ListPlaceActionLinksResponse.from_base(data)

    def locationsPlaceActionLinksPatch(self, name: str, req: PlaceActionLink|dict, **opts) -> PlaceActionLink:
        """
        Updates the specified place action link and returns it.
        opts: updateMask
        """
        options = make_options(LocationsPlaceActionLinksPatchOptions, opts)
        body = _check_body(make_body(PlaceActionLink, req))
        data = self._request(f"v1/{path_param(name)}", "PATCH", options=options, body=body)
        return PlaceActionLink.from_base(data)

    def placeActionTypeMetadataList(self, **opts) -> ListPlaceActionTypeMetadataResponse:
        """
        Returns the list of available place action types for a location or country.
        opts: filter, languageCode, pageSize, pageToken
        """
        options = make_options(PlaceActionTypeMetadataListOptions, opts)
        data = self._request("v1/placeActionTypeMetadata", options=options)
        return ListPlaceActionTypeMetadataResponse.from_base(data)
