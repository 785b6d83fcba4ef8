import logging
from typing import List, Optional

from pydantic import ValidationError

from condaview._src import constants
from condaview._src.exceptions import (
    CondaCommandFailed,
    CondaIOError,
    CondaNotInstalled,
    CondaParseError,
    EnvironmentNotFound,
)
from condaview._src.models.environment import EnvironmentList
from condaview._src.models.package import CondaPackage, PackageList
from condaview._src.runner import CommandResult, CommandRunner, SubprocessRunner
from condaview._src.utils import decode_output


logger = logging.getLogger(__name__)


class Conda():
    def __init__(self, executable: str = constants.DEFAULT_CONDA_EXE, runner: Optional[CommandRunner] = None):
        """Conda wraps the conda executable. Every call spawns exactly one
        child process and either returns its parsed output or raises a
        subclass of CondaError.

        Parameters
        ----------
        executable: str
            Name or path of the conda executable
        runner: CommandRunner
            Object used to spawn the process, defaults to a SubprocessRunner
        """
        self.executable = executable
        self.runner = runner if runner is not None else SubprocessRunner()

    def _spawn(self, args: List[str]) -> CommandResult:
        command = [self.executable, *args]
        try:
            return self.runner.run(command)
        except (FileNotFoundError, PermissionError) as err:
            logger.debug("could not spawn %s: %s", self.executable, err)
            raise CondaNotInstalled(self.executable, err) from err
        except OSError as err:
            raise CondaIOError(command, err) from err

    def run(self, args: List[str]) -> bytes:
        """Run conda with `args` and return the captured stdout.

        Raises
        ------
        CondaNotInstalled
            conda could not be executed at all
        CondaIOError
            any other OS level failure while starting the process
        CondaCommandFailed
            conda ran but exited with a non-zero status
        """
        result = self._spawn(args)
        if result.ok:
            return result.stdout

        # prefer stderr, then stdout, then just the exit code
        message = decode_output(result.stderr) or decode_output(result.stdout)
        if not message:
            message = f"exit code {result.exit_code}"
        raise CondaCommandFailed([self.executable, *args], message)

    def list_environments(self) -> EnvironmentList:
        output = self.run(constants.ENV_LIST_ARGS)
        try:
            return EnvironmentList.model_validate_json(output)
        except ValidationError as err:
            raise CondaParseError(str(err)) from err

    def list_packages(self, env_name: str) -> List[CondaPackage]:
        """Return the packages installed in the named environment, in the
        order conda lists them.

        Raises
        ------
        EnvironmentNotFound
            conda's diagnostic says the environment does not exist
        CondaParseError
            any record is missing a name, version or channel
        """
        try:
            output = self.run(constants.package_list_args(env_name))
        except CondaCommandFailed as err:
            if _is_not_found(err.message):
                logger.debug("classified failure as missing environment: %s", err.message)
                raise EnvironmentNotFound(env_name) from err
            raise

        try:
            return PackageList.validate_json(output)
        except ValidationError as err:
            raise CondaParseError(str(err)) from err

    def version(self) -> str:
        return decode_output(self.run(constants.VERSION_ARGS))

    def is_installed(self) -> bool:
        """Check whether the conda executable can be spawned at all.

        Only a spawn failure counts as "not installed", a conda that runs
        and fails is still installed.
        """
        try:
            self._spawn(constants.VERSION_ARGS)
        except CondaNotInstalled:
            return False
        except CondaIOError:
            return False
        return True


def _is_not_found(message: str) -> bool:
    lowered = message.lower()
    return any(marker in lowered for marker in constants.NOT_FOUND_MARKERS)
