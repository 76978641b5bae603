"""
Shell probe adapter — run a command with its version argument.

Standard error is merged into standard output because many tools
print their version there. No timeout and no retries: one probe,
fully awaited, is final.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import time

from has.adapters.base import ProbeAdapter
from has.core.models.probe import ProbeResult, ProbeStrategy

logger = logging.getLogger(__name__)


class ShellProbeAdapter(ProbeAdapter):
    """Probe commands with ``subprocess.run``.

    Spawn failures are folded into status 127, the same as the shell
    reporting "command not found".
    """

    @property
    def name(self) -> str:
        return "shell"

    def is_available(self, command: str) -> bool:
        return shutil.which(command) is not None

    def execute(self, command: str, strategy: ProbeStrategy) -> ProbeResult:
        argv = strategy.command_line(command)

        env = os.environ.copy()
        env.update(strategy.env)

        logger.debug("Probing: %s", " ".join(argv))
        start = time.monotonic()

        try:
            result = subprocess.run(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                env=env,
                check=False,
            )
        except OSError as e:
            logger.debug("Cannot spawn %s: %s", argv[0], e)
            return ProbeResult.not_installed(command, output=str(e))

        elapsed_ms = int((time.monotonic() - start) * 1000)
        output = result.stdout.decode("utf-8", errors="replace") if result.stdout else ""
        logger.debug("%s exited %d in %dms", argv[0], result.returncode, elapsed_ms)

        status = result.returncode
        if status < 0:
            # killed by signal N; report it the way a shell would (128 + N)
            status = 128 - status

        return ProbeResult(command=command, output=output, status=status)
