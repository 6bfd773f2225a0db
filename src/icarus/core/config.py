# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Solver configuration.

The configuration is built once (from the command line, the environment or
code) and handed explicitly to the episode runner and the HTTP client.

Environment variables:
    ICARUS_TIMES: Number of mazes to solve in one run
    ICARUS_HOST: Host of the maze authority
    ICARUS_PORT: Port of the maze authority
    ICARUS_BASE_URL: Full base URL of the maze authority (overrides host/port)
    ICARUS_TIMEOUT: Per-request timeout in seconds
    ICARUS_CONNECT_RETRIES: Connection attempts retried before giving up
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9001

_ENV_FIELDS = {
    "ICARUS_TIMES": "times",
    "ICARUS_HOST": "host",
    "ICARUS_PORT": "port",
    "ICARUS_BASE_URL": "base_url",
    "ICARUS_TIMEOUT": "request_timeout_s",
    "ICARUS_CONNECT_RETRIES": "connect_retries",
}


def normalize_base_url(base_url: str) -> str:
    """Add a scheme when missing and strip trailing slashes."""
    target = base_url.strip()
    if not target:
        raise ValueError("Authority URL cannot be empty")

    if "://" not in target:
        target = f"http://{target}"

    parsed = urlparse(target)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"Invalid authority URL: {base_url}")

    return target.rstrip("/")


class SolverConfig(BaseModel):
    """Settings for one run of the solver."""

    model_config = ConfigDict(extra="forbid")

    times: int = Field(default=1, ge=0, description="Number of mazes to solve")
    host: str = Field(default=DEFAULT_HOST, description="Maze authority host")
    port: int = Field(
        default=DEFAULT_PORT, ge=1, le=65535, description="Maze authority port"
    )
    base_url: Optional[str] = Field(
        default=None, description="Full authority URL; overrides host and port"
    )
    request_timeout_s: float = Field(
        default=15.0, gt=0, description="Seconds to wait for each reply"
    )
    connect_retries: int = Field(
        default=3,
        ge=0,
        description="Retries for connections that never reached the authority",
    )

    @property
    def authority_url(self) -> str:
        if self.base_url:
            return normalize_base_url(self.base_url)
        host = self.host.strip()
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return normalize_base_url(f"{host}:{self.port}")

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any
    ) -> "SolverConfig":
        """Build a config from ``ICARUS_*`` variables.

        Keyword overrides that are not ``None`` take precedence over the
        environment.
        """
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for var, field_name in _ENV_FIELDS.items():
            raw = environ.get(var)
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
