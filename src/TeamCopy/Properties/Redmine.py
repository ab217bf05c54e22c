"""
    <entry>
      <string>hudson-plugins-redmine-RedmineProjectProperty</string>
      <base-property>
        <projectName>Team1.JobBill1</projectName>
"""

from TeamCopy.Property import Property


class Redmine(Property):
    key = "hudson-plugins-redmine-RedmineProjectProperty"

    def fix(self, entryN, rewriter) -> bool:
        rewriter.fix_team_name(
            entryN.find("base-property/projectName"), label="redmine projectName"
        )
        return False
