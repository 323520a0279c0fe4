"""
Credentials for the API clients.

One authenticated session per application, so this is a module singleton,
`auth`.  The API client classes register the scopes they need through
append_scopes() and take whatever credentials() hands back.
"""
from collections.abc import Iterable
from pathlib import Path
import json
import logging

import google.auth
import google.auth.exceptions
from google.auth.credentials import Credentials as BaseCredentials
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

logger = logging.getLogger(__name__)

def _as_list(value) -> list:
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, Iterable):
        return [value]
    return list(value)

class __GoogleAuth():
    """
    Session with Google for the API clients.
    See https://developers.google.com/workspace/guides/create-credentials for
    how to get a client secrets file.  The session is looked for in order:
    the token cache, the installed app OAuth flow using the client secrets, and
    google.auth.default() (GOOGLE_APPLICATION_CREDENTIALS, gcloud, metadata server).
    Credentials obtained elsewhere, e.g. a service account, can be set on creds.
    """

    __SCOPES = {
        "drive": "https://www.googleapis.com/auth/drive",
        "drive-ro": "https://www.googleapis.com/auth/drive.readonly",
        "drive-file": "https://www.googleapis.com/auth/drive.file",
        "drive-metadata": "https://www.googleapis.com/auth/drive.metadata",
        "drive-metadata-ro": "https://www.googleapis.com/auth/drive.metadata.readonly",
        "drive-appdata": "https://www.googleapis.com/auth/drive.appdata",
        "sdm": "https://www.googleapis.com/auth/sdm.service",
        "business": "https://www.googleapis.com/auth/business.manage",
        "openid": "openid",
        "email": "email",
        "profile": "profile",
    }
    __SCOPE_URL_PREFIX = "https://www.googleapis.com/auth/"

    __DEFAULT_PROMPT_MSG = "Please visit this URL to authorize gapirest: {url}"
    __DEFAULT_SUCCESS_MSG = "Authorization complete, this window can be closed."
    __DEFAULT_SECRETS = Path.home() / "gapirest_client_secrets.json"
    __DEFAULT_CACHE = Path.home() / "gapirest_tokens.json"

    def __init__(self) -> None:
        self.reset()

    def __bool__(self) -> bool:
        return self.connected

    @classmethod
    def get_scope(cls, scope: str) -> str:
        """Scope URL for a short label, raw scope URLs are returned as is, otherwise ''"""
        s = str(scope)
        if s in cls.__SCOPES:
            return cls.__SCOPES[s]
        return s if s.startswith(cls.__SCOPE_URL_PREFIX) else ""

    def reset(self) -> None:
        self.__secrets = self.__DEFAULT_SECRETS
        self.__cache = self.__DEFAULT_CACHE
        self.__creds = None
        self.__scopes = []
        self.auth_server = "localhost"
        self.auth_port = 0
        self.auth_prompt_msg = self.__DEFAULT_PROMPT_MSG
        self.auth_flow_success_msg = self.__DEFAULT_SUCCESS_MSG

    @property
    def client_secrets(self) -> Path:
        return self.__secrets

    @property
    def cred_cache(self) -> Path:
        return self.__cache

    @property
    def creds(self) -> BaseCredentials|None:
        return self.__creds

    @creds.setter
    def creds(self, value: BaseCredentials|None) -> None:
        self.__creds = value

    @property
    def connected(self) -> bool:
        return self.__creds is not None and bool(self.__creds.valid)

    @property
    def session_scopes(self) -> list[str]:
        """What the current credentials were granted, as opposed to scopes which were asked for."""
        if not self.connected:
            return []
        return list(getattr(self.__creds, "scopes", None) or [])

    def scope_in_session(self, scope: str) -> bool:
        s = self.get_scope(scope)
        return bool(s) and s in self.session_scopes

    @property
    def scopes(self) -> list[str]:
        return self.__scopes

    @scopes.setter
    def scopes(self, value: None|str|list[str]) -> None:
        """Replace the requested scopes, unknown labels are dropped."""
        self.__scopes = []
        self.append_scopes(value)
        if not self.__scopes:
            self.__creds = None

    def append_scopes(self, *args) -> bool:
        """
        Request more scopes, unknown labels are ignored.
        A live session lacking any of them is reconnected.
        """
        for a in args:
            for s in (self.get_scope(v) for v in _as_list(a)):
                if s and s not in self.__scopes:
                    self.__scopes.append(s)
        if self.connected and not all(s in self.session_scopes for s in self.__scopes):
            return self.connect()
        return True

    @property
    def config(self) -> dict:
        """All settings as a dict, e.g. to save into a config file."""
        return {
            "secrets": str(self.__secrets),
            "cache": str(self.__cache),
            "scopes": list(self.__scopes),
            "server": self.auth_server,
            "port": self.auth_port,
            "auth_prompt_msg": self.auth_prompt_msg,
            "flow_success_msg": self.auth_flow_success_msg,
        }

    @config.setter
    def config(self, config: dict) -> None:
        """
        Apply settings from a dict, missing keys are left alone.
        Changing where the session comes from drops the current one, the next
        credentials() call reconnects.
        """
        if config.get("server") is not None:
            self.auth_server = str(config["server"])
        if config.get("port") is not None:
            self.auth_port = int(config["port"])
        if config.get("auth_prompt_msg") is not None:
            self.auth_prompt_msg = str(config["auth_prompt_msg"])
        if config.get("flow_success_msg") is not None:
            self.auth_flow_success_msg = str(config["flow_success_msg"])
        changed = False
        if config.get("secrets") is not None:
            changed |= Path(config["secrets"]) != self.__secrets
            self.__secrets = Path(config["secrets"])
        if config.get("cache") is not None:
            changed |= Path(config["cache"]) != self.__cache
            self.__cache = Path(config["cache"])
        if config.get("scopes"):
            self.scopes = config["scopes"]
        if changed:
            self.__creds = None

    def _from_cache(self, scopes: list[str]) -> BaseCredentials|None:
        if not self.__cache.is_file():
            return None
        with open(self.__cache, "r", encoding="utf-8") as f:
            cached = json.load(f)
        # a refresh will not add scopes, so a cache for fewer is useless
        if not all(s in cached.get("scopes", []) for s in scopes):
            logger.info("token cache %s lacks requested scopes, discarding", self.__cache)
            self.__cache.unlink()
            return None
        creds = Credentials.from_authorized_user_info(cached, scopes)
        if not creds.valid and creds.refresh_token:
            try:
                creds.refresh(Request())
            except google.auth.exceptions.RefreshError as e:
                logger.warning("refreshing cached token failed, discarding %s: %s", self.__cache, e)
                self.__cache.unlink(missing_ok=True)
                return None
        return creds

    def _from_flow(self, scopes: list[str]) -> BaseCredentials|None:
        if not self.__secrets.is_file():
            return None
        flow = InstalledAppFlow.from_client_secrets_file(str(self.__secrets), scopes)
        return flow.run_local_server(host=self.auth_server, port=self.auth_port,
                                     authorization_prompt_message=self.auth_prompt_msg,
                                     success_message=self.auth_flow_success_msg)

    def _from_default(self, scopes: list[str]) -> BaseCredentials|None:
        try:
            creds, _ = google.auth.default(scopes=scopes)
            if not creds.valid:
                creds.refresh(Request())
        except google.auth.exceptions.DefaultCredentialsError as e:
            logger.info("no application default credentials: %s", e)
            return None
        return creds

    def _save_cache(self, scopes: list[str]) -> None:
        refresh_token = getattr(self.__creds, "refresh_token", None)
        if not refresh_token:
            return
        token = {"refresh_token": refresh_token, "client_id": self.__creds.client_id,
                 "client_secret": self.__creds.client_secret, "scopes": scopes}
        with open(self.__cache, "w", encoding="utf-8") as f:
            json.dump(token, f, ensure_ascii=False, indent=2)

    def connect(self) -> bool:
        """New session for the requested scopes, False if there are none or nothing worked."""
        self.__creds = None
        scopes = list(self.__scopes)
        if not scopes:
            return False
        for source in (self._from_cache, self._from_flow, self._from_default):
            self.__creds = source(scopes)
            if self.connected:
                break
        if not self.connected:
            self.__creds = None
            return False
        self._save_cache(scopes)
        return True

    def credentials(self) -> BaseCredentials|None:
        """Credentials for an API client, connecting on demand, None if that fails."""
        if not self.connected:
            self.connect()
        return self.__creds

auth = __GoogleAuth()
