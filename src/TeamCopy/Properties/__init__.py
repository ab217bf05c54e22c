"""
The entries in project-properties we know how to rewrite. Every other entry
is passed through untouched.
"""

from enum import Enum
from typing import Optional

from TeamCopy.Property import Property
from TeamCopy.Properties.BuildTrigger import BuildTrigger
from TeamCopy.Properties.Builders import Builders
from TeamCopy.Properties.Mailer import Mailer
from TeamCopy.Properties.Redmine import Redmine


class PropertyKind(Enum):
    MAILER = "hudson-tasks-Mailer"
    BUILD_TRIGGER = "hudson-tasks-BuildTrigger"
    BUILDERS = "builders"
    REDMINE = "hudson-plugins-redmine-RedmineProjectProperty"

    @classmethod
    def from_key(cls, key: Optional[str]) -> Optional["PropertyKind"]:
        if key is None:
            return None
        try:
            return cls(key)
        except ValueError:
            return None

    def handler(self) -> Property:
        return _handlers[self]()


_handlers = {
    PropertyKind.MAILER: Mailer,
    PropertyKind.BUILD_TRIGGER: BuildTrigger,
    PropertyKind.BUILDERS: Builders,
    PropertyKind.REDMINE: Redmine,
}
