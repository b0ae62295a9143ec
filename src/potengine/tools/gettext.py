"""GNU gettext catalog tool.

Runs msgmerge, msginit, and msgfmt as blocking child processes. Results are
read from standard output; success and failure are signalled only by the
exit status and standard error text. There is no timeout: a hung tool is
the operator's problem.

Python 3.13+.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING

from potengine.constants import DEFAULT_MSGFMT, DEFAULT_MSGINIT, DEFAULT_MSGMERGE, TEMPLATE_CHARSET
from potengine.diagnostics import (
    ErrorTemplate,
    ExternalToolFailedError,
    ExternalToolMissingError,
)

if TYPE_CHECKING:
    from pathlib import Path

    from potengine.types import CatalogSourceText, LocaleCode

__all__ = ["GettextTool"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GettextTool:
    """CatalogTool backed by the GNU gettext command line tools.

    Commands:
        merge:   msgmerge --quiet <source> <template>
        init:    msginit --no-translator --input=<template> --locale=<locale> --output-file=-
        compile: msgfmt --output-file=- <source>

    Attributes:
        msgmerge: msgmerge executable
        msginit: msginit executable
        msgfmt: msgfmt executable
        encoding: Encoding of PO text on standard output
    """

    msgmerge: str = DEFAULT_MSGMERGE
    msginit: str = DEFAULT_MSGINIT
    msgfmt: str = DEFAULT_MSGFMT
    encoding: str = TEMPLATE_CHARSET

    def merge(self, existing_source_path: Path, template_path: Path) -> CatalogSourceText:
        """Run msgmerge and return the updated catalog source."""
        stdout = self._run(
            self.msgmerge,
            "--quiet",
            str(existing_source_path),
            str(template_path),
        )
        return stdout.decode(self.encoding)

    def init(self, template_path: Path, locale: LocaleCode) -> CatalogSourceText:
        """Run msginit and return the new catalog source."""
        stdout = self._run(
            self.msginit,
            "--no-translator",
            f"--input={template_path}",
            f"--locale={locale}",
            "--output-file=-",
        )
        return stdout.decode(self.encoding)

    def compile(self, source_path: Path) -> bytes:
        """Run msgfmt and return the compiled catalog bytes."""
        return self._run(self.msgfmt, "--output-file=-", str(source_path))

    def _run(self, executable: str, *args: str) -> bytes:
        """Run one tool invocation.

        Raises:
            ExternalToolMissingError: If the executable cannot be spawned
            ExternalToolFailedError: If it exits with a non-zero status
        """
        command = [executable, *args]
        logger.debug("Running catalog tool: %s", shlex.join(command))
        try:
            completed = subprocess.run(command, capture_output=True, check=False)
        except OSError as e:
            logger.error("Catalog tool %s could not be started: %s", executable, e)
            diagnostic = ErrorTemplate.tool_missing(executable, str(e))
            raise ExternalToolMissingError(diagnostic, tool=executable) from e

        if completed.returncode != 0:
            stderr = completed.stderr.decode(self.encoding, errors="replace")
            logger.error(
                "Catalog tool %s exited with status %d", executable, completed.returncode
            )
            diagnostic = ErrorTemplate.tool_failed(executable, completed.returncode, stderr)
            raise ExternalToolFailedError(
                diagnostic,
                tool=executable,
                exit_status=completed.returncode,
                stderr=stderr,
            )
        return completed.stdout
