"""
Copy a team and its jobs to a newly created team. User must be sys admin.

Every job of the from team is copied into the to team. Its config.xml is
rewritten on the way (see TeamCopy.rewriter): job names qualified with the
from team are requalified with the to team and email recipients are set to
the email argument or removed.

nodes and views of the from team are handled according to a policy:

    move     move them to the to team
    visible  make them visible to the to team (nodes also get enabled)
    ignore   do nothing (default)

Without act, we only show what would be changed.

    c = CopyTeam(conf_fn="copyteam.toml", from_team="Team1", to_team="TeamX")
    c.copy()
"""

from TeamCopy.baseApp import BaseApp, allowed_policies
from TeamCopy.rewriter import ConfigRewriter, Failure
from TeamCopy.teamManager import (
    Team,
    TeamAlreadyExists,
    TeamError,
    TeamNotFound,
)
from typing import Optional


class CopyError(Exception):
    pass


class CopyTeam(BaseApp):
    def __init__(
        self,
        *,
        from_team: str,
        to_team: str,
        email: Optional[str] = None,
        nodes: Optional[str] = None,
        views: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.from_team = from_team
        self.to_team = to_team
        # command line wins over config
        self.email = email if email is not None else self.default("email")
        self.nodes = nodes if nodes is not None else self.default("nodes")
        self.views = views if views is not None else self.default("views")

    def copy(self) -> list:
        """
        Returns the list of copied (qualified) job names. Raises CopyError at
        the first problem; jobs copied before stay copied.
        """
        fromTeam = self._check()
        toTeam = self._create_team()

        copiedL = list()
        for job in sorted(fromTeam.job_names()):
            new = self._per_job(job=job)
            if new is not None:
                copiedL.append(new)

        self._nodes(fromTeam=fromTeam, toTeam=toTeam)
        self._views(fromTeam=fromTeam, toTeam=toTeam)
        print(f"Copied {len(copiedL)} job(s) from {self.from_team} to {self.to_team}")
        return copiedL

    #
    # private
    #

    def _check(self) -> Team:
        host = self.host
        if not host.is_team_management_enabled():
            raise CopyError("Team management is not enabled")

        if not host.is_current_user_sys_admin():
            raise CopyError("User not authorized to create team")

        try:
            fromTeam = host.find_team(self.from_team)
        except TeamNotFound:
            raise CopyError(f"From team {self.from_team} not found")

        for name, policy in (("nodes", self.nodes), ("views", self.views)):
            if policy is not None and policy.lower() not in allowed_policies:
                raise CopyError(f"{name} must be one of move, visible or ignore")
        return fromTeam

    def _create_team(self) -> Team:
        if not self.act:
            try:
                self.host.find_team(self.to_team)
            except TeamNotFound:
                print(f"  would create team {self.to_team}")
                return Team(name=self.to_team)
            raise CopyError(f"To team {self.to_team} already exists")

        try:
            return self.host.create_team(self.to_team)
        except TeamAlreadyExists:
            raise CopyError(f"To team {self.to_team} already exists")
        except OSError as e:
            raise CopyError(str(e))

    def _per_job(self, *, job: str) -> Optional[str]:
        unqualified = self.host.get_unqualified_job_name(job)
        print(f"* Job {job} -> {self.to_team}.{unqualified}")
        rw = ConfigRewriter(
            old_team=self.from_team, new_team=self.to_team, email=self.email
        )
        try:
            xml = rw.rewrite_file(path=self.host.config_file(job))
        except Failure as e:
            raise CopyError(f"Error reading config.xml for job {job}\n{e}") from e

        for change in rw.changes:
            print(f"    {change}")

        if self.act:
            try:
                return self.host.create_job_from_xml(
                    name=unqualified, team=self.to_team, xml=xml
                )
            except TeamError as e:
                raise CopyError(str(e)) from e
        print("  no action mode")
        return None

    def _nodes(self, *, fromTeam: Team, toTeam: Team) -> None:
        if self.nodes is None:
            return
        policy = self.nodes.lower()
        if policy == "move":
            for node in fromTeam.node_names():
                print(f"* Moving node {node}")
                if self.act:
                    self.host.move_node(fromTeam, toTeam, node)
        elif policy == "visible":
            for teamNode in fromTeam.nodes:
                print(f"* Making node {teamNode.id} visible to {toTeam.name}")
                if self.act:
                    self.host.add_node_visibility(teamNode, toTeam.name)
                    # the to team wants to be able to use the node
                    self.host.set_node_enabled(teamNode.id, toTeam, True)

    def _views(self, *, fromTeam: Team, toTeam: Team) -> None:
        if self.views is None:
            return
        policy = self.views.lower()
        if policy == "move":
            for view in fromTeam.view_names():
                print(f"* Moving view {view}")
                if self.act:
                    self.host.move_view(fromTeam, toTeam, view)
        elif policy == "visible":
            for teamView in fromTeam.views:
                print(f"* Making view {teamView.id} visible to {toTeam.name}")
                if self.act:
                    self.host.add_view_visibility(teamView, toTeam.name)
