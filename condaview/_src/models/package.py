from typing import List

from pydantic import BaseModel, ConfigDict, TypeAdapter


class CondaPackage(BaseModel):
    """A single record of `conda list --json`

    conda reports many more keys (build_string, base_url, ...), those are
    ignored. The three below are required.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    channel: str


PackageList = TypeAdapter(List[CondaPackage])
