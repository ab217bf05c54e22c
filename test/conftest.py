import pytest

teams = """<?xml version='1.0' encoding='UTF-8'?>
<teamManager>
  <sysAdmins>
    <string>admin</string>
  </sysAdmins>
  <teams>
    <team>
      <name>Team1</name>
      <jobs>
        <string>Team1.JobBill1</string>
        <string>Team1.JobBill2</string>
      </jobs>
      <nodes>
        <teamNode>
          <id>slave1</id>
          <enabled>true</enabled>
          <visibleTo/>
        </teamNode>
      </nodes>
      <views>
        <teamView>
          <id>Overview</id>
          <visibleTo/>
        </teamView>
      </views>
    </team>
    <team>
      <name>Other</name>
      <jobs/>
      <nodes/>
      <views/>
    </team>
  </teams>
</teamManager>
"""

job1 = """<?xml version='1.0' encoding='UTF-8'?>
<project>
  <cascadingChildrenNames class="java.util.concurrent.CopyOnWriteArraySet">
    <string>Team1.JobBill2</string>
  </cascadingChildrenNames>
  <project-properties class="java.util.concurrent.ConcurrentHashMap">
    <entry>
      <string>hudson-tasks-Mailer</string>
      <external-property>
        <originalValue class="hudson.tasks.Mailer">
          <recipients>bill@team1.com</recipients>
        </originalValue>
      </external-property>
    </entry>
    <entry>
      <string>hudson-tasks-BuildTrigger</string>
      <external-property>
        <originalValue class="hudson.tasks.BuildTrigger">
          <childProjects>Team1.JobBill2</childProjects>
        </originalValue>
      </external-property>
    </entry>
  </project-properties>
</project>
"""

job2 = """<?xml version='1.0' encoding='UTF-8'?>
<project>
  <cascadingProjectName>Team1.JobBill1</cascadingProjectName>
  <project-properties class="java.util.concurrent.ConcurrentHashMap"/>
</project>
"""


@pytest.fixture
def home(tmp_path):
    """A Hudson home with team Team1 (two jobs, a node, a view) and Other."""
    (tmp_path / "teams.xml").write_text(teams, encoding="utf-8")
    for name, xml in (("JobBill1", job1), ("JobBill2", job2)):
        job_dir = tmp_path / "teams" / "Team1" / "jobs" / name
        job_dir.mkdir(parents=True)
        (job_dir / "config.xml").write_text(xml, encoding="utf-8")
    return tmp_path


@pytest.fixture
def conf(tmp_path, home):
    fn = tmp_path / "copyteam.toml"
    fn.write_text(
        f"""
[HOST]
home = '{home}'
user = "admin"
""",
        encoding="utf-8",
    )
    return fn
