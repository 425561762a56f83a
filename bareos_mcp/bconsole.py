"""bconsole client: run one console command per subprocess and capture its output."""
import logging
import subprocess
from dataclasses import dataclass, fields
from typing import List, Optional

logger = logging.getLogger(__name__)


class BconsoleError(Exception):
    """Raised when bconsole cannot be started or reports a failure."""

    def __init__(self, message: str, stderr: str = "", returncode: Optional[int] = None):
        super().__init__(message)
        self.stderr = stderr
        self.returncode = returncode


@dataclass
class JobFilter:
    """Filters accepted by ``list jobs``.

    Fields are appended to the command in declaration order. Precedence
    between overlapping filters (e.g. ``hours`` vs ``days``) is bconsole's
    business, not ours.
    """

    job: Optional[str] = None
    client: Optional[str] = None
    jobstatus: Optional[str] = None
    jobtype: Optional[str] = None
    joblevel: Optional[str] = None
    volume: Optional[str] = None
    pool: Optional[str] = None
    days: Optional[int] = None
    hours: Optional[int] = None
    last: bool = False
    count: bool = False

    def to_command(self) -> str:
        parts = ["list jobs"]
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool):
                if value:
                    parts.append(f.name)
            elif value is not None:
                parts.append(f"{f.name}={value}")
        return " ".join(parts)


class BconsoleClient:
    """Thin wrapper around the bconsole binary.

    Every call spawns a fresh process, writes the command followed by
    ``quit`` and waits for it to exit.
    """

    def __init__(self, command: Optional[List[str]] = None):
        self.command = list(command) if command else ["bconsole"]

    @classmethod
    def from_settings(cls, settings) -> "BconsoleClient":
        return cls(settings.bconsole_command())

    def execute_command(self, command: str) -> str:
        """Run a single console command and return its stdout.

        Output on stdout wins over the exit status: bconsole prints banners
        to stderr and sometimes exits non-zero on success. Only an empty
        stdout together with a non-zero exit is treated as a failure.
        """
        logger.debug("bconsole <- %s", command)
        try:
            proc = subprocess.Popen(
                self.command,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.warning("Failed to spawn %s: %s", self.command[0], e)
            raise BconsoleError(f"Failed to spawn bconsole: {e}") from e

        with proc:
            try:
                stdout, stderr = proc.communicate(f"{command}\nquit\n")
            except OSError as e:
                proc.kill()
                logger.warning("I/O error talking to bconsole: %s", e)
                raise BconsoleError(f"bconsole I/O error: {e}") from e
            except BaseException:
                proc.kill()
                raise

        returncode = proc.returncode
        if stdout:
            if returncode != 0:
                logger.warning(
                    "bconsole exited with status %s but produced output; treating as success",
                    returncode,
                )
            return stdout

        if returncode != 0:
            logger.warning("bconsole command %r failed (exit %s): %s", command, returncode, stderr.strip())
            raise BconsoleError(
                f"bconsole command failed: {stderr}", stderr=stderr, returncode=returncode
            )
        return stdout

    def list_jobs(self, job_filter: Optional[JobFilter] = None) -> str:
        return self.execute_command((job_filter or JobFilter()).to_command())

    def get_job_status(self, job_id: str) -> str:
        return self.execute_command(f"list jobid={job_id}")

    def get_job_log(self, job_id: str) -> str:
        return self.execute_command(f"list joblog jobid={job_id}")

    def list_clients(self) -> str:
        return self.execute_command("list clients")

    def list_filesets(self) -> str:
        return self.execute_command("list filesets")

    def list_pools(self) -> str:
        return self.execute_command("list pools")

    def list_volumes(self, pool: Optional[str] = None) -> str:
        if pool is not None:
            return self.execute_command(f"list volumes pool={pool}")
        return self.execute_command("list volumes")

    def list_files(self, job_id: str) -> str:
        return self.execute_command(f"list files jobid={job_id}")

    def show_job(self, name: str) -> str:
        return self.execute_command(f"show job={name}")

    def show_jobdefs(self, name: str) -> str:
        return self.execute_command(f"show jobdefs={name}")

    def show_schedule(self, name: str) -> str:
        return self.execute_command(f"show schedule={name}")
