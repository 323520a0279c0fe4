"""
A collection of client libraries for Google REST APIs.
Each API is a class with one method per operation that builds the request URL,
sends one request and hands back the response as a typed resource.

Python dataclasses are used for the resource structs and most of the logic is
translating between those and the raw dicts on the wire: RFC 3339 timestamps,
64-bit integers carried as strings and base64 encoded binary fields.

Right now Drive, My Business Place Actions and Smart Device Management are supported.
"""
import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
