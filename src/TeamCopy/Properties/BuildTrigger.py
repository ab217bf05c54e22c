"""
Requalify the downstream projects of a build trigger.

    <entry>
      <string>hudson-tasks-BuildTrigger</string>
      <external-property>
        <originalValue class="hudson.tasks.BuildTrigger">
          <childProjects>Team1.JobBill4, Team1.JobBill5</childProjects>

becomes (for Team1 -> TeamX)

          <childProjects>TeamX.JobBill4, TeamX.JobBill5</childProjects>
"""

import re

from TeamCopy.Property import Property

# any run of commas and whitespace separates two names
separator = re.compile(r"[,\s]+")


class BuildTrigger(Property):
    key = "hudson-tasks-BuildTrigger"

    def fix(self, entryN, rewriter) -> bool:
        childProjectsN = entryN.find("external-property/originalValue/childProjects")
        if childProjectsN is None:
            return False
        old = (childProjectsN.text or "").strip()
        childrenL = [child for child in separator.split(old) if child]
        newL = [rewriter.swap(child) for child in childrenL]
        # leave the text alone unless something changed
        if newL != childrenL:
            new = ", ".join(newL)
            childProjectsN.text = new
            rewriter.changes.append(f"childProjects: {old} -> {new}")
        return False
