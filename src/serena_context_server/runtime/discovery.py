"""Interpreter discovery for the Serena agent."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import List

from ..errors import DiscoveryFailure, ProbeSpawnFailure
from .specs import PYTHON_RUNTIME, InterpreterSpec
from .types import ProbeResult
from .validation import is_accepted_version, is_path_acceptable

logger = logging.getLogger(__name__)

DEFAULT_PROBE_TIMEOUT = 5.0


class InterpreterDiscovery:
    """Finds a Python interpreter the Serena agent can run on.

    Walks the candidate tables of an InterpreterSpec in order. Every call
    re-enumerates from scratch; nothing is cached between calls.
    """

    def __init__(
        self,
        spec: InterpreterSpec = PYTHON_RUNTIME,
        probe_timeout: float = DEFAULT_PROBE_TIMEOUT,
    ):
        """Initialize discovery.

        Args:
            spec: Interpreter specification to discover
            probe_timeout: Seconds to wait for each version probe
        """
        self.spec = spec
        self.probe_timeout = probe_timeout

    def discover(self) -> str:
        """Return the first acceptable interpreter.

        Priority:
        1. Preferred versioned names found on PATH
        2. Fixed fallback locations, then unversioned names

        Returns:
            Resolved path (PATH lookups) or the fallback candidate verbatim

        Raises:
            DiscoveryFailure: If no candidate is accepted
        """
        attempted: List[str] = []

        for name in self.spec.preferred_names:
            attempted.append(name)
            path = shutil.which(name)
            if not path:
                logger.debug("%s not found on PATH", name)
                continue
            if self._accept(path):
                return path

        for candidate in self.spec.fallback_candidates:
            attempted.append(candidate)
            if self._accept(candidate):
                return candidate

        raise DiscoveryFailure(
            attempted,
            required_versions=sorted(self.spec.accepted_versions),
            config_key=self.spec.config_key,
        )

    def _accept(self, candidate: str) -> bool:
        """Apply validate -> probe -> match to a single candidate."""
        if not is_path_acceptable(candidate, self.spec.trusted_prefixes):
            logger.debug("Rejected unsafe interpreter path %r", candidate)
            return False

        try:
            result = self.probe(candidate)
        except ProbeSpawnFailure as e:
            logger.debug("Skipping interpreter candidate: %s", e)
            return False

        if not is_accepted_version(result.stdout, self.spec.accepted_prefixes):
            logger.debug(
                "Rejected %s: unsupported version %r",
                candidate,
                result.stdout.strip(),
            )
            return False

        logger.info("Using %s (%s)", candidate, result.stdout.strip())
        return True

    def probe(self, candidate: str) -> ProbeResult:
        """Run the version probe for a candidate.

        Raises:
            ProbeSpawnFailure: If the process cannot be spawned, times out
                or exits non-zero
        """
        try:
            completed = subprocess.run(
                [candidate] + self.spec.version_check.args,
                capture_output=True,
                text=True,
                timeout=self.probe_timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ProbeSpawnFailure(
                candidate, f"timed out after {self.probe_timeout:g}s"
            ) from e
        except OSError as e:
            raise ProbeSpawnFailure(candidate, str(e)) from e

        result = ProbeResult(
            candidate=candidate,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
        )
        if not result.succeeded:
            raise ProbeSpawnFailure(
                candidate, f"exited with status {result.returncode}"
            )
        return result

