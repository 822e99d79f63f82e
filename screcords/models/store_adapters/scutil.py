import subprocess
import sys
from typing import List, Optional

from screcords.models.store_adapter import StoreAdapter
from screcords.models.store_config import StoreConfig
from screcords.utils.exceptions import StoreUnavailableError

NO_SUCH_KEY = "No such key"


class ScutilAdapter(StoreAdapter):
    """Adapter for the macOS dynamic store, driven through the interactive scutil command."""

    def __init__(self, config: Optional[StoreConfig] = None) -> None:
        """Initialize with the scutil binary and an optional per-query timeout."""
        self.command = config.command if config else "scutil"
        self.timeout = config.timeout if config else None

    def _run(self, *commands: str) -> str:
        """Open a session, run the given commands and quit. Returns stdout."""
        script = "\n".join(("open",) + commands + ("quit", ""))
        try:
            completed = subprocess.run(
                [self.command],
                input=script,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise StoreUnavailableError(f"scutil command not found: {self.command}") from e
        except subprocess.TimeoutExpired as e:
            raise StoreUnavailableError(f"scutil did not answer within {self.timeout}s") from e

        if completed.returncode != 0:
            raise StoreUnavailableError(
                f"scutil exited with {completed.returncode}: {completed.stderr.strip()}"
            )
        return completed.stdout

    def list_subkeys(self) -> List[str]:
        """
        Parse the `list` output, e.g.

          subKey [0] = Setup:
          subKey [1] = State:/Network/Global/IPv4
        """
        subkeys = []
        for line in self._run("list").splitlines():
            if "{" in line or "}" in line or "=" not in line:
                continue
            subkey = line.split("=", 1)[1].strip()
            if subkey:
                subkeys.append(subkey)
        return subkeys

    def show(self, subkey: str) -> Optional[str]:
        output = self._run(f"show {subkey}")
        if not output.strip() or output.strip() == NO_SUCH_KEY:
            print(f"[Scutil] No such key '{subkey}'", file=sys.stderr)
            return None
        return output
