from typing import List

from pydantic import BaseModel, ConfigDict

from condaview._src.utils import get_name_from_prefix


class EnvironmentList(BaseModel):
    """Output of `conda env list --json`

    Paths are kept in the order conda reported them.
    """
    model_config = ConfigDict(frozen=True)

    envs: List[str]

    def names(self) -> List[str]:
        return [get_name_from_prefix(path) for path in self.envs]

    def __len__(self):
        return len(self.envs)
