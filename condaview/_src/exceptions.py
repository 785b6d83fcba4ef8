class CondaError(Exception):
    """Base class for every failure talking to conda"""


class CondaNotInstalled(CondaError):
    def __init__(self, executable, err=None):
        self.executable = executable
        self.msg = (
            f"Failed to execute `{executable}`. Is conda installed and in your PATH?"
        )
        if err is not None:
            self.msg += f"\nError message: {err}"
        super().__init__(self.msg)


class CondaIOError(CondaError):
    def __init__(self, command, err):
        self.command = command
        self.msg = (
            f"Failed to start conda!"
            f"\nRan command: `{' '.join(command)}`"
            f"\nError message: {err}"
        )
        super().__init__(self.msg)


class CondaCommandFailed(CondaError):
    def __init__(self, command, message):
        self.command = command
        self.message = message
        self.msg = f"Conda command failed: {message}"
        super().__init__(self.msg)


class EnvironmentNotFound(CondaError):
    def __init__(self, name):
        self.name = name
        self.msg = f"Conda environment '{name}' not found"
        super().__init__(self.msg)


class CondaParseError(CondaError):
    def __init__(self, message):
        self.message = message
        self.msg = f"Failed to parse JSON output from conda: {message}"
        super().__init__(self.msg)
