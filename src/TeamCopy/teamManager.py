"""
The team management service of the CI server as seen by copyteam.

A team owns jobs, nodes and views. Job names are qualified with the team name,
e.g. "Team1.JobBill2", using TEAM_SEPARATOR.
"""

from abc import ABC, abstractmethod
from pathlib import Path

TEAM_SEPARATOR = "."


class TeamError(Exception):
    pass


class TeamNotFound(TeamError):
    pass


class TeamAlreadyExists(TeamError):
    pass


class JobAlreadyExists(TeamError):
    pass


class TeamNode:
    def __init__(self, *, id: str, enabled: bool = True, visibleTo=None) -> None:
        self.id = id
        self.enabled = enabled
        self.visibleTo = list(visibleTo or [])

    def __repr__(self) -> str:
        return f"TeamNode({self.id!r})"


class TeamView:
    def __init__(self, *, id: str, visibleTo=None) -> None:
        self.id = id
        self.visibleTo = list(visibleTo or [])

    def __repr__(self) -> str:
        return f"TeamView({self.id!r})"


class Team:
    def __init__(self, *, name: str, jobs=None, nodes=None, views=None) -> None:
        self.name = name
        self.jobs = set(jobs or [])
        self.nodes = list(nodes or [])
        self.views = list(views or [])

    def job_names(self) -> set:
        return set(self.jobs)

    def node_names(self) -> list:
        return [node.id for node in self.nodes]

    def view_names(self) -> list:
        return [view.id for view in self.views]

    def __repr__(self) -> str:
        return f"Team({self.name!r})"


class TeamManager(ABC):
    @abstractmethod
    def is_team_management_enabled(self) -> bool:
        pass

    @abstractmethod
    def is_current_user_sys_admin(self) -> bool:
        pass

    @abstractmethod
    def find_team(self, name: str) -> Team:
        """Raises TeamNotFound."""
        pass

    @abstractmethod
    def create_team(self, name: str) -> Team:
        """Raises TeamAlreadyExists."""
        pass

    @abstractmethod
    def config_file(self, job: str) -> Path:
        """Path of the config.xml of a qualified job name."""
        pass

    @abstractmethod
    def create_job_from_xml(self, *, name: str, team: str, xml: bytes) -> str:
        """Persist a job config under team; returns the qualified job name."""
        pass

    @abstractmethod
    def move_node(self, from_team: Team, to_team: Team, node: str) -> None:
        pass

    @abstractmethod
    def add_node_visibility(self, node: TeamNode, team: str) -> None:
        pass

    @abstractmethod
    def set_node_enabled(self, node: str, team: Team, enabled: bool) -> None:
        pass

    @abstractmethod
    def move_view(self, from_team: Team, to_team: Team, view: str) -> None:
        pass

    @abstractmethod
    def add_view_visibility(self, view: TeamView, team: str) -> None:
        pass

    def get_unqualified_job_name(self, job: str) -> str:
        """
        Strips the team part from a qualified job name; names without
        separator are returned as they are.
        """
        team, sep, rest = job.partition(TEAM_SEPARATOR)
        if not sep:
            return job
        return rest
