from enum import Enum


DEFAULT_CONDA_EXE = "conda"

# environment variables checked, in order, for the conda executable
CONDA_EXE_ENVVARS = ["CONDAVIEW_CONDA_EXE", "CONDA_EXE"]

ENV_LIST_ARGS = ["env", "list", "--json"]

VERSION_ARGS = ["--version"]

# conda reports unknown environments only through its diagnostic text,
# and the wording differs between conda releases
NOT_FOUND_MARKERS = ("not found", "could not find", "environmentlocationnotfound")


def package_list_args(env_name: str) -> list[str]:
    return ["list", "-n", env_name, "--json"]


class SupportedOutputFormats(str, Enum):
    TABLE = "table"
    YAML = "yaml"
    JSON = "json"
