"""
Builders can reference other jobs. We know two of them: copyartifact and
multijob.

    <entry>
      <string>builders</string>
      <describable-list-property>
        <originalValue class="hudson.util.DescribableList">
          <hudson.plugins.copyartifact.CopyArtifact>
            <projectName>Team1.JobBill3</projectName>
            ...
          </hudson.plugins.copyartifact.CopyArtifact>
          <com.tikal.jenkins.plugins.multijob.MultiJobBuilder>
            <phaseName>Phase 1</phaseName>
            <phaseJobs>
              <com.tikal.jenkins.plugins.multijob.PhaseJobsConfig>
                <jobName>Team1.JobBill6</jobName>
                ...
"""

from TeamCopy.Property import Property

copyArtifact = "hudson.plugins.copyartifact.CopyArtifact"
multiJobBuilder = "com.tikal.jenkins.plugins.multijob.MultiJobBuilder"
phaseJobsConfig = "com.tikal.jenkins.plugins.multijob.PhaseJobsConfig"


class Builders(Property):
    key = "builders"

    def fix(self, entryN, rewriter) -> bool:
        origValueN = entryN.find("describable-list-property/originalValue")
        if origValueN is None:
            return False

        for artifactN in origValueN.findall(copyArtifact):
            rewriter.fix_team_name(
                artifactN.find("projectName"), label="copyartifact projectName"
            )

        for builderN in origValueN.findall(multiJobBuilder):
            for phaseJobsN in builderN.findall("phaseJobs"):
                for configN in phaseJobsN.findall(phaseJobsConfig):
                    rewriter.fix_team_name(
                        configN.find("jobName"), label="multijob jobName"
                    )
        return False
