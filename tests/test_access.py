from pathlib import Path
import json

import google.auth
import google.auth.exceptions

from gapirest.access import auth
from gapirest.drive import Drive
from gapirest.smartdevicemanagement import SmartDeviceManagement

DRIVE = "https://www.googleapis.com/auth/drive"
SDM = "https://www.googleapis.com/auth/sdm.service"

class FakeCreds():
    def __init__(self, scopes, valid=True) -> None:
        self.scopes = scopes
        self.valid = valid

def test_get_scope():
    assert(auth.get_scope("drive") == DRIVE)
    assert(auth.get_scope("sdm") == SDM)
    assert(auth.get_scope("business") == "https://www.googleapis.com/auth/business.manage")
    assert(auth.get_scope("https://www.googleapis.com/auth/drive.file") == "https://www.googleapis.com/auth/drive.file")
    assert(auth.get_scope("not-a-scope") == "")

def test_scopes():
    auth.scopes = ["drive", "drive", "bogus", "sdm"]
    assert(auth.scopes == [DRIVE, SDM])
    auth.scopes = "drive-ro"
    assert(auth.scopes == ["https://www.googleapis.com/auth/drive.readonly"])
    auth.scopes = None
    assert(auth.scopes == [])

def test_config_roundtrip(tmp_path):
    auth.config = {"secrets": str(tmp_path / "secrets.json"), "cache": str(tmp_path / "tokens.json"),
                   "scopes": ["drive", "sdm"], "server": "127.0.0.1", "port": "8088"}
    config = auth.config
    assert(config["secrets"] == str(tmp_path / "secrets.json"))
    assert(config["cache"] == str(tmp_path / "tokens.json"))
    assert(config["scopes"] == [DRIVE, SDM])
    assert(config["server"] == "127.0.0.1")
    assert(config["port"] == 8088)
    assert(auth.client_secrets == tmp_path / "secrets.json")
    assert(isinstance(auth.cred_cache, Path))

def test_reset():
    auth.scopes = "drive"
    auth.auth_port = 9000
    auth.reset()
    assert(auth.scopes == [])
    assert(auth.auth_port == 0)
    assert(auth.creds is None)

def test_connect_without_scopes():
    assert(not auth.connect())
    assert(not auth)
    assert(auth.credentials() is None)

def test_config_new_secrets_drops_creds(tmp_path):
    auth.scopes = "drive"
    auth.creds = FakeCreds([DRIVE])
    auth.config = {"port": 9000}
    assert(auth.connected)
    auth.config = {"secrets": str(tmp_path / "other.json")}
    assert(auth.creds is None)
    assert(auth.scopes == [DRIVE])

def test_connect_discards_cache_missing_scopes(tmp_path, monkeypatch):
    def no_default(scopes=None):
        raise google.auth.exceptions.DefaultCredentialsError("none")
    monkeypatch.setattr(google.auth, "default", no_default)
    cache = tmp_path / "tokens.json"
    cache.write_text(json.dumps({"refresh_token": "r", "client_id": "c", "client_secret": "s",
                                 "scopes": [DRIVE]}))
    auth.config = {"secrets": str(tmp_path / "missing.json"), "cache": str(cache), "scopes": ["drive", "sdm"]}
    assert(not auth.connect())
    assert(not cache.exists())
    assert(auth.creds is None)

def test_external_creds():
    creds = FakeCreds([DRIVE])
    auth.scopes = "drive"
    auth.creds = creds
    assert(auth)
    assert(auth.connected)
    assert(auth.session_scopes == [DRIVE])
    assert(auth.scope_in_session("drive"))
    assert(not auth.scope_in_session("sdm"))
    assert(auth.credentials() is creds)

def test_invalid_creds_not_connected():
    auth.creds = FakeCreds([DRIVE], valid=False)
    assert(not auth.connected)
    assert(auth.session_scopes == [])

def test_client_connect(http):
    creds = FakeCreds([DRIVE])
    auth.scopes = "drive"
    auth.creds = creds
    drive = Drive.connect(http=http)
    assert(drive.credentials is creds)
    assert(DRIVE in auth.scopes)

def test_append_scopes():
    assert(auth.append_scopes("drive", ["sdm", "bogus"]))
    assert(auth.scopes == [DRIVE, SDM])

def test_client_connect_adds_scopes(http):
    creds = FakeCreds([DRIVE, SDM])
    auth.scopes = "drive"
    auth.creds = creds
    sdm = SmartDeviceManagement.connect(http=http)
    assert(auth.scopes == [DRIVE, SDM])
    assert(sdm.credentials is creds)
