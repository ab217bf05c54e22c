"""
Test the directory based team manager
"""

import pytest

from TeamCopy.hudsonHome import HudsonHome
from TeamCopy.teamManager import (
    JobAlreadyExists,
    TeamAlreadyExists,
    TeamError,
    TeamNotFound,
)


def test_not_enabled(tmp_path):
    h = HudsonHome(home=tmp_path, user="admin")
    assert h.is_team_management_enabled() is False
    assert h.is_current_user_sys_admin() is False


def test_sys_admin(home):
    assert HudsonHome(home=home, user="admin").is_current_user_sys_admin()
    assert not HudsonHome(home=home, user="bill").is_current_user_sys_admin()


def test_find_team(home):
    h = HudsonHome(home=home, user="admin")
    team = h.find_team("Team1")
    assert team.job_names() == {"Team1.JobBill1", "Team1.JobBill2"}
    assert team.node_names() == ["slave1"]
    assert team.view_names() == ["Overview"]
    with pytest.raises(TeamNotFound):
        h.find_team("Nope")


def test_create_team(home):
    h = HudsonHome(home=home, user="admin")
    h.create_team("TeamX")
    assert (home / "teams" / "TeamX" / "jobs").is_dir()
    # persisted
    again = HudsonHome(home=home, user="admin")
    assert again.find_team("TeamX").job_names() == set()
    with pytest.raises(TeamAlreadyExists):
        again.create_team("Team1")


def test_unqualified_job_name(home):
    h = HudsonHome(home=home, user="admin")
    assert h.get_unqualified_job_name("Team1.JobBill1") == "JobBill1"
    assert h.get_unqualified_job_name("JobBill1") == "JobBill1"


def test_config_file(home):
    h = HudsonHome(home=home, user="admin")
    fn = h.config_file("Team1.JobBill1")
    assert fn == home / "teams" / "Team1" / "jobs" / "JobBill1" / "config.xml"
    assert fn.exists()
    assert h.config_file("Public") == home / "jobs" / "Public" / "config.xml"


def test_create_job_from_xml(home):
    h = HudsonHome(home=home, user="admin")
    h.create_team("TeamX")
    name = h.create_job_from_xml(name="JobBill1", team="TeamX", xml=b"<project/>")
    assert name == "TeamX.JobBill1"
    assert h.config_file(name).read_bytes() == b"<project/>"
    assert HudsonHome(home=home, user="admin").find_team("TeamX").job_names() == {
        "TeamX.JobBill1"
    }
    with pytest.raises(JobAlreadyExists):
        h.create_job_from_xml(name="JobBill1", team="TeamX", xml=b"<project/>")


def test_move_node_and_view(home):
    h = HudsonHome(home=home, user="admin")
    team1 = h.find_team("Team1")
    other = h.find_team("Other")
    h.move_node(team1, other, "slave1")
    h.move_view(team1, other, "Overview")
    h = HudsonHome(home=home, user="admin")
    assert h.find_team("Team1").node_names() == []
    assert h.find_team("Other").node_names() == ["slave1"]
    assert h.find_team("Other").view_names() == ["Overview"]
    with pytest.raises(TeamNotFound):
        h.move_node(team1, other, "slave1")


def test_visibility(home):
    h = HudsonHome(home=home, user="admin")
    team1 = h.find_team("Team1")
    other = h.find_team("Other")
    h.add_node_visibility(team1.nodes[0], "Other")
    h.set_node_enabled("slave1", other, True)
    h.add_view_visibility(team1.views[0], "Other")
    # adding twice does not duplicate
    h.add_view_visibility(team1.views[0], "Other")

    h = HudsonHome(home=home, user="admin")
    team1 = h.find_team("Team1")
    assert team1.nodes[0].visibleTo == ["Other"]
    assert team1.views[0].visibleTo == ["Other"]
    assert h.doc.xpath("//teamNode[id = 'slave1']/enabledFor/string/text()") == [
        "Other"
    ]
    h.set_node_enabled("slave1", other, False)
    assert h.doc.xpath("//teamNode[id = 'slave1']/enabledFor/string") == []


def test_malformed_teams_xml(tmp_path):
    (tmp_path / "teams.xml").write_text("<teamManager><teams>", encoding="utf-8")
    with pytest.raises(TeamError, match="Unable to read"):
        HudsonHome(home=tmp_path, user="admin")
