"""Collaborators: HTTP transport, token codec, persisted slot, API and prompts."""

from .api import TreinoApi
from .base import HttpClient, HttpResponse, KeyValueStore, Navigator, TokenCodec
from .http_client import HttpxClient
from .navigation import CliNavigator
from .storage import JsonFileStore
from .token_codec import JwtTokenCodec

__all__ = [
    "CliNavigator",
    "HttpClient",
    "HttpResponse",
    "HttpxClient",
    "JsonFileStore",
    "JwtTokenCodec",
    "KeyValueStore",
    "Navigator",
    "TokenCodec",
    "TreinoApi",
]
