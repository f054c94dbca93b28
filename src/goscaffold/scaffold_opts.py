"""Options dataclass for a scaffolding run."""

import os
from dataclasses import dataclass, field


@dataclass
class ScaffoldOpts:
    """All options for one scaffolding run."""

    project_name: str
    parent_dir: str = field(default_factory=os.getcwd)

    @property
    def project_dir(self):
        return os.path.join(self.parent_dir, self.project_name)
