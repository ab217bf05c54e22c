"""
TeamManager working directly on a Hudson home directory.

    {home}/teams.xml                                    team registry
    {home}/teams/{team}/jobs/{unqualified}/config.xml   job config

teams.xml looks like this

    <teamManager>
      <sysAdmins>
        <string>admin</string>
      </sysAdmins>
      <teams>
        <team>
          <name>Team1</name>
          <jobs>
            <string>Team1.JobBill1</string>
          </jobs>
          <nodes>
            <teamNode>
              <id>slave1</id>
              <enabled>true</enabled>
              <visibleTo/>
              <enabledFor/>
            </teamNode>
          </nodes>
          <views>
            <teamView>
              <id>Overview</id>
              <visibleTo/>
            </teamView>
          </views>
        </team>
      </teams>
    </teamManager>

If there is no teams.xml, team management is not enabled.
"""

from lxml import etree
from pathlib import Path

from TeamCopy.teamManager import (
    Team,
    TeamAlreadyExists,
    TeamError,
    TeamManager,
    TeamNode,
    TeamNotFound,
    TeamView,
    TEAM_SEPARATOR,
    JobAlreadyExists,
)

parser = etree.XMLParser(remove_blank_text=True)


class HudsonHome(TeamManager):
    def __init__(self, *, home, user: str) -> None:
        self.home = Path(home)
        self.user = user
        self.teams_fn = self.home / "teams.xml"
        if self.teams_fn.exists():
            try:
                self.doc = etree.parse(str(self.teams_fn), parser)
            except (etree.XMLSyntaxError, OSError) as e:
                raise TeamError(f"Unable to read {self.teams_fn}: {e}") from e
        else:
            self.doc = None

    def is_team_management_enabled(self) -> bool:
        return self.doc is not None

    def is_current_user_sys_admin(self) -> bool:
        if self.doc is None:
            return False
        adminsL = self.doc.xpath("/teamManager/sysAdmins/string/text()")
        return self.user in [admin.strip() for admin in adminsL]

    def find_team(self, name: str) -> Team:
        teamN = self._teamN(name)
        jobsL = [job.strip() for job in teamN.xpath("jobs/string/text()")]
        nodesL = list()
        for nodeN in teamN.xpath("nodes/teamNode"):
            nodesL.append(
                TeamNode(
                    id=nodeN.findtext("id", "").strip(),
                    enabled=nodeN.findtext("enabled", "true").strip() == "true",
                    visibleTo=nodeN.xpath("visibleTo/string/text()"),
                )
            )
        viewsL = list()
        for viewN in teamN.xpath("views/teamView"):
            viewsL.append(
                TeamView(
                    id=viewN.findtext("id", "").strip(),
                    visibleTo=viewN.xpath("visibleTo/string/text()"),
                )
            )
        return Team(name=name, jobs=jobsL, nodes=nodesL, views=viewsL)

    def create_team(self, name: str) -> Team:
        if self._teamN(name, strict=False) is not None:
            raise TeamAlreadyExists(f"To team {name} already exists")
        teamsN = self.doc.find("teams")
        if teamsN is None:
            teamsN = etree.SubElement(self.doc.getroot(), "teams")
        teamN = etree.SubElement(teamsN, "team")
        etree.SubElement(teamN, "name").text = name
        for tag in ("jobs", "nodes", "views"):
            etree.SubElement(teamN, tag)
        (self.home / "teams" / name / "jobs").mkdir(parents=True, exist_ok=True)
        self._save()
        return Team(name=name)

    def config_file(self, job: str) -> Path:
        team, sep, unqualified = job.partition(TEAM_SEPARATOR)
        if not sep:
            # jobs without team live in the public jobs dir
            return self.home / "jobs" / job / "config.xml"
        return self.home / "teams" / team / "jobs" / unqualified / "config.xml"

    def create_job_from_xml(self, *, name: str, team: str, xml: bytes) -> str:
        qualified = team + TEAM_SEPARATOR + name
        job_dir = self.home / "teams" / team / "jobs" / name
        if job_dir.exists():
            raise JobAlreadyExists(f"Job {qualified} already exists")
        job_dir.mkdir(parents=True)
        (job_dir / "config.xml").write_bytes(xml)
        teamN = self._teamN(team)
        jobsN = self._child(teamN, "jobs")
        etree.SubElement(jobsN, "string").text = qualified
        self._save()
        return qualified

    def move_node(self, from_team: Team, to_team: Team, node: str) -> None:
        self._move(
            from_team=from_team, to_team=to_team, kind="nodes/teamNode", id=node
        )

    def add_node_visibility(self, node: TeamNode, team: str) -> None:
        nodeN = self._itemN(kind="nodes/teamNode", id=node.id)
        self._add_string(self._child(nodeN, "visibleTo"), team)
        node.visibleTo.append(team)
        self._save()

    def set_node_enabled(self, node: str, team: Team, enabled: bool) -> None:
        nodeN = self._itemN(kind="nodes/teamNode", id=node)
        enabledForN = self._child(nodeN, "enabledFor")
        if enabled:
            self._add_string(enabledForN, team.name)
        else:
            for stringN in enabledForN.findall("string"):
                if (stringN.text or "").strip() == team.name:
                    enabledForN.remove(stringN)
        self._save()

    def move_view(self, from_team: Team, to_team: Team, view: str) -> None:
        self._move(
            from_team=from_team, to_team=to_team, kind="views/teamView", id=view
        )

    def add_view_visibility(self, view: TeamView, team: str) -> None:
        viewN = self._itemN(kind="views/teamView", id=view.id)
        self._add_string(self._child(viewN, "visibleTo"), team)
        view.visibleTo.append(team)
        self._save()

    #
    # private
    #

    def _add_string(self, parentN, value: str) -> None:
        if value not in [(s.text or "").strip() for s in parentN.findall("string")]:
            etree.SubElement(parentN, "string").text = value

    def _child(self, node, tag: str):
        childN = node.find(tag)
        if childN is None:
            childN = etree.SubElement(node, tag)
        return childN

    def _itemN(self, *, kind: str, id: str):
        resL = self.doc.xpath(
            f"/teamManager/teams/team/{kind}[normalize-space(id) = $id]", id=id
        )
        if not resL:
            raise TeamNotFound(f"{kind.split('/')[1]} {id} not found")
        return resL[0]

    def _move(self, *, from_team: Team, to_team: Team, kind: str, id: str) -> None:
        container, tag = kind.split("/")
        fromN = self._teamN(from_team.name)
        resL = fromN.xpath(f"{kind}[normalize-space(id) = $id]", id=id)
        if not resL:
            raise TeamNotFound(f"{tag} {id} not owned by team {from_team.name}")
        itemN = resL[0]
        itemN.getparent().remove(itemN)
        self._child(self._teamN(to_team.name), container).append(itemN)
        self._save()

    def _save(self) -> None:
        self.doc.write(
            str(self.teams_fn), pretty_print=True, xml_declaration=True, encoding="UTF-8"
        )

    def _teamN(self, name: str, *, strict: bool = True):
        if self.doc is None:
            raise TeamNotFound("Team management is not enabled")
        resL = self.doc.xpath(
            "/teamManager/teams/team[normalize-space(name) = $name]", name=name
        )
        if resL:
            return resL[0]
        if strict:
            raise TeamNotFound(f"Team {name} not found")
        return None
