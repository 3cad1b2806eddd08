"""Models describing the host platform used by standard-directory lookups."""

from __future__ import annotations

import ntpath
import os
import posixpath
import sys
from enum import Enum
from types import ModuleType
from typing import Dict, Optional

from pydantic import BaseModel, Field


class Platform(str, Enum):
    """Platform tags understood by the directory helpers (``sys.platform`` values)."""

    LINUX = "linux"
    DARWIN = "darwin"
    WIN32 = "win32"


class DirCategory(str, Enum):
    """Logical OS directory roles."""

    APP_INSTALL = "app-install"
    SHARED_DATA = "shared-data"
    SYSTEM_CONFIG = "system-config"
    USER_CONFIG = "user-config"
    USER_HOME = "user-home"
    USER_BIN = "user-bin"
    DESKTOP = "desktop"


class DirContext(BaseModel):
    """Platform tag plus the environment the directory helpers may read."""

    platform: str
    env: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def current(cls) -> "DirContext":
        return cls(platform=sys.platform, env=dict(os.environ))

    @property
    def platform_tag(self) -> Optional[Platform]:
        try:
            return Platform(self.platform)
        except ValueError:
            return None

    @property
    def pathmod(self) -> ModuleType:
        """Path module matching the platform's separator conventions."""

        return ntpath if self.platform == Platform.WIN32.value else posixpath
