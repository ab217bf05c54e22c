"""
Email recipients are replaced with the email argument.

    <entry>
      <string>hudson-tasks-Mailer</string>
      <external-property>
        <originalValue class="hudson.tasks.Mailer">
          <recipients>${email}</recipients>
          <dontNotifyEveryUnstableBuild>false</dontNotifyEveryUnstableBuild>
          <sendToIndividuals>false</sendToIndividuals>
        </originalValue>
        <propertyOverridden>false</propertyOverridden>
        <modified>true</modified>
      </external-property>
    </entry>

If no email is given, the whole entry is removed.
"""

from TeamCopy.Property import Property


class Mailer(Property):
    key = "hudson-tasks-Mailer"

    def fix(self, entryN, rewriter) -> bool:
        if rewriter.email is None:
            return True
        recipientsN = entryN.find("external-property/originalValue/recipients")
        if recipientsN is not None:
            # verbatim, no validation of the addresses
            recipientsN.text = rewriter.email
            rewriter.changes.append(f"recipients: {rewriter.email}")
        return False
