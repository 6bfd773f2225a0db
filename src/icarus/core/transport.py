# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Transport to the maze authority.

The authority exposes three GET endpoints below its base URL:
- ``/awake``: returns the survey of the start cell without moving
- ``/move/<direction>``: moves one cell and returns the new survey
- ``/done``: tells the authority the run is over

Every endpoint answers with the same JSON body::

    {"survey": {"top": bool, "right": bool, "bottom": bool, "left": bool},
     "victory": bool, "message": str, "error": bool}
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

import requests
from pydantic import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import SolverConfig
from .errors import TransportFailure
from .types import Move, MoveResult, Reply, Survey

logger = logging.getLogger(__name__)


class MazeTransport(ABC):
    """Round trips to the maze authority, one at a time."""

    @abstractmethod
    def wake(self) -> Survey:
        """Return the survey of the start cell without consuming a move."""
        raise NotImplementedError

    @abstractmethod
    def move(self, direction: Union[Move, str]) -> MoveResult:
        """Move one cell and return the survey of the cell arrived at.

        Raises:
            InvalidDirectionError: If ``direction`` is not a Move.
            TransportFailure: If the authority could not be reached or its
                reply could not be decoded.
        """
        raise NotImplementedError

    @abstractmethod
    def done(self) -> None:
        """Notify the authority that no more episodes will be run."""
        raise NotImplementedError

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class HTTPMazeClient(MazeTransport):
    """MazeTransport talking to the authority over HTTP."""

    def __init__(
        self,
        config: Optional[SolverConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or SolverConfig()
        self._base = self.config.authority_url
        self._timeout = float(self.config.request_timeout_s)
        self._http = session if session is not None else self._create_session()

    def _create_session(self) -> requests.Session:
        """
        Create a requests Session that only retries failed connections.

        A request that reached the authority is never replayed: a replayed
        move would walk the agent a second cell. Read and status retries are
        therefore disabled and only connection establishment is retried.
        """
        session = requests.Session()

        retry_strategy = Retry(
            total=self.config.connect_retries,
            connect=self.config.connect_retries,
            read=0,
            status=0,
            other=0,
            redirect=0,
            backoff_factor=0.3,
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(
            max_retries=retry_strategy, pool_connections=1, pool_maxsize=1
        )
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        session.headers.update({"Connection": "keep-alive"})

        return session

    @property
    def base_url(self) -> str:
        return self._base

    def wake(self) -> Survey:
        reply = self._request("awake")
        return reply.survey

    def move(self, direction: Union[Move, str]) -> MoveResult:
        move = Move.parse(direction)
        reply = self._request(f"move/{move.value}")
        if reply.victory:
            logger.info("Victory on move %s: %s", move.value, reply.message)
        return MoveResult(
            survey=reply.survey,
            victory=reply.victory,
            message=reply.message or None,
        )

    def done(self) -> None:
        self._request("done")

    def close(self) -> None:
        """Close the HTTP session to release its connections."""
        if self._http is not None:
            self._http.close()

    def _request(self, path: str) -> Reply:
        url = f"{self._base}/{path}"
        logger.debug("GET %s", url)
        try:
            r = self._http.get(url, timeout=self._timeout)
        except requests.Timeout as e:
            raise TransportFailure(
                f"authority did not answer {url} within {self._timeout}s"
            ) from e
        except requests.RequestException as e:
            raise TransportFailure(f"could not reach authority at {url}: {e}") from e

        if not 200 <= r.status_code < 300:
            raise TransportFailure(
                f"authority answered {url} with HTTP {r.status_code}"
            )

        try:
            payload = r.json()
        except ValueError as e:
            raise TransportFailure(f"authority sent a non-JSON reply to {url}") from e

        try:
            reply = Reply.model_validate(payload)
        except ValidationError as e:
            raise TransportFailure(
                f"authority sent a malformed reply to {url}: {e}"
            ) from e

        if reply.error:
            raise TransportFailure(
                f"authority reported an error for {path}: "
                f"{reply.message or 'no message'}"
            )
        logger.debug("Reply from %s: %s", path, reply.survey)
        return reply
