"""
Shared request plumbing for the API client classes.

Each API class only knows its base URL, scopes and the path template of each
operation.  Everything else, building the URL, rendering the query string,
JSON encoding the body and doing the single HTTP round trip, happens here.
The round trip itself is a googleapiclient HttpRequest over httplib2 so errors
come back as the usual googleapiclient.errors.HttpError.
"""
from collections.abc import Mapping
from dataclasses import is_dataclass
from typing import Self
from urllib.parse import quote, urlencode
import json
import logging
import threading

import httplib2
import google_auth_httplib2
from google.auth.credentials import Credentials
from googleapiclient.errors import HttpError
from googleapiclient.http import HttpRequest
from googleapiclient.model import JsonModel, MediaModel

from . import __version__
from .access import auth
from .resources import GoogleResourceBase

logger = logging.getLogger(__name__)

USER_AGENT = f"gapirest/{__version__}"

# response handling modes for _request()
JSON = "json"
MEDIA = "media"
NO_CONTENT = "none"

_json_model = JsonModel(data_wrapper=False)
_media_model = MediaModel()

def _no_content(resp, content) -> None:
    return None

_POSTPROC = {
    JSON: _json_model.response,
    MEDIA: _media_model.response,
    NO_CONTENT: _no_content,
}

def _query_value(value) -> str:
    """Render like the API expects: lowercase booleans and comma joined lists"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(v) for v in value)
    return str(value)

def query_params(options: GoogleResourceBase|Mapping|None) -> list[tuple[str, str]]:
    """
    Query parameters for the options that are present, in declaration order.
    Absent (None) options are never sent.
    """
    if options is None:
        return []
    base = options.to_base() if isinstance(options, GoogleResourceBase) else dict(options)
    return [(k, _query_value(v)) for k, v in base.items() if v is not None]

def build_url(base_url: str, path: str, query: list[tuple[str, str]]|None = None) -> str:
    url = f"{base_url}{path}"
    if query:
        url += "?" + urlencode(query)
    return url

def path_param(value) -> str:
    """
    Path parameters are substituted raw apart from escaping, resource names
    like 'enterprises/XYZ/devices/123' keep their slashes.
    """
    return quote(str(value), safe="/")

def make_options(cls: type, opts: dict) -> GoogleResourceBase:
    """
    Validate keyword options against the operation's options dataclass.
    Unknown names raise TypeError from the dataclass constructor.
    """
    return cls(**opts)

def make_body(cls: type, body: GoogleResourceBase|Mapping) -> dict:
    """
    Wire form of a request body.  A dict is run through the resource class
    so it can hold either wire or python values.
    """
    if isinstance(body, cls):
        return body.to_base()
    if is_dataclass(body):
        raise TypeError(f"expected {cls.__name__}, got {type(body).__name__}")
    if isinstance(body, Mapping):
        return cls.from_base(body).to_base()
    raise TypeError(f"expected {cls.__name__} or dict, got {type(body).__name__}")

class GoogleApiClientBase():
    """
    Base for one class per API surface.
    credentials is any google.auth credentials object, None sends the
    requests unauthenticated.  base_url can point at an emulator or regional
    endpoint and http can be given to use a preconfigured transport.
    """
    _BASE_URL: str = ""
    _SCOPES: list[str] = []

    def __init__(self, credentials: Credentials|None = None,
                 base_url: str|None = None,
                 http=None) -> None:
        self._credentials = credentials
        self._base_url = base_url if base_url else self._BASE_URL
        if not self._base_url.endswith("/"):
            self._base_url += "/"
        self._http = http
        self._local = threading.local()

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{self._base_url}"

    @classmethod
    def connect(cls, **kwargs) -> Self:
        """
        Client authenticated through the module auth helper with the scopes
        this API needs added to the session.
        kwargs are passed on to the constructor.
        """
        auth.append_scopes(*cls._SCOPES)
        return cls(credentials=auth.credentials(), **kwargs)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def credentials(self) -> Credentials|None:
        return self._credentials

    @property
    def http(self):
        """
        The transport.  httplib2.Http is not thread safe, so unless one was
        given each thread builds its own on first use.
        """
        if self._http is not None:
            return self._http
        h = getattr(self._local, "http", None)
        if h is None:
            if self._credentials is not None:
                h = google_auth_httplib2.AuthorizedHttp(self._credentials, http=httplib2.Http())
            else:
                h = httplib2.Http()
            self._local.http = h
        return h

    def _request(self, path: str, method: str = "GET",
                 options: GoogleResourceBase|Mapping|None = None,
                 body: dict|None = None,
                 response: str = JSON):
        """
        One round trip.  No retries, whatever the transport or the API
        reports is raised to the caller.
        """
        url = build_url(self._base_url, path, query_params(options))
        headers = {"accept": "application/json" if response != MEDIA else "*/*",
                   "user-agent": USER_AGENT}
        payload = None
        if body is not None:
            payload = json.dumps(body)
            headers["content-type"] = "application/json"
        logger.debug("%s %s", method, url)
        request = HttpRequest(self.http, _POSTPROC[response], url,
                              method=method, body=payload, headers=headers)
        try:
            return request.execute(num_retries=0)
        except HttpError as e:
            logger.warning("%s %s failed with status %s", method, url, e.resp.status)
            raise
