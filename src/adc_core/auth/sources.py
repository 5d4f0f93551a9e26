"""Credential sources and resolution outcomes.

A resolution strategy ends in exactly one of three outcomes:

- ``Found``: a credential file was located and read.
- ``NotConfigured``: the strategy does not apply (variable unset, file absent);
  callers move on to the next strategy.
- ``Misconfigured``: the strategy was explicitly requested but cannot be
  satisfied; callers surface this as an error.
"""

import enum
import io
from dataclasses import dataclass, field


class SourceOrigin(enum.Enum):
    """Where a credential source was found."""

    ENV_PATH = "env_path"
    WELL_KNOWN_PATH = "well_known_path"


@dataclass(frozen=True)
class CredentialSource:
    """Serialized credential material read during resolution.

    The stream is handed to the fetcher factory once and then dropped.
    """

    stream: io.BytesIO = field(repr=False)
    origin: SourceOrigin
    path: str


@dataclass(frozen=True)
class Found:
    source: CredentialSource


@dataclass(frozen=True)
class NotConfigured:
    pass


@dataclass(frozen=True)
class Misconfigured:
    """An explicit configuration that points nowhere."""

    env_var_name: str
    cause: str


ResolutionResult = Found | NotConfigured | Misconfigured
