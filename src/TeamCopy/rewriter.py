"""
Rewrite the config.xml of a job so that it fits into a new team.

We work on the raw xml with lxml instead of loading the job. Only the few nodes
we know about are touched; everything else stays as it was.

    rw = ConfigRewriter(old_team="Team1", new_team="TeamX", email=None)
    xml = rw.rewrite_file(path="teams/Team1/jobs/JobBill/config.xml")

Cascading project names qualified with the old team name are requalified with
the new team name:

    <cascadingProjectName>Team1.JobBill2</cascadingProjectName>
    <cascadingChildrenNames class="java.util.concurrent.CopyOnWriteArraySet">
      <string>Team1.JobBill5</string>
    </cascadingChildrenNames>

becomes

    <cascadingProjectName>TeamX.JobBill2</cascadingProjectName>
    <cascadingChildrenNames class="java.util.concurrent.CopyOnWriteArraySet">
      <string>TeamX.JobBill5</string>
    </cascadingChildrenNames>

Entries in project-properties are handled per PropertyKind, see
TeamCopy.Properties. Names not qualified with the old team are untouched.
"""

from io import BytesIO
from lxml import etree
from pathlib import Path
from typing import Optional

from TeamCopy.Properties import PropertyKind
from TeamCopy.teamManager import TEAM_SEPARATOR


class Failure(Exception):
    pass


class NotFound(Failure):
    pass


class ParseError(Failure):
    pass


class ReadError(Failure):
    pass


class WriteError(Failure):
    pass


class SchemaError(Failure):
    pass


def swap_prefix(name: str, old_prefix: str, new_prefix: str) -> str:
    """
    Returns name with old_prefix replaced by new_prefix if name starts with
    old_prefix; otherwise name unchanged. Case-sensitive, no normalization.
    """
    if name.startswith(old_prefix):
        return new_prefix + name[len(old_prefix) :]
    return name


class ConfigRewriter:
    def __init__(
        self, *, old_team: str, new_team: str, email: Optional[str] = None
    ) -> None:
        if not old_team or not new_team:
            raise ValueError("old_team and new_team must not be empty")
        self.old_team = old_team
        self.new_team = new_team
        self.email = email
        self.old_prefix = old_team + TEAM_SEPARATOR
        self.new_prefix = new_team + TEAM_SEPARATOR
        self.changes = list()

    def rewrite(self, doc: etree._ElementTree) -> bytes:
        """
        Rewrites doc in place and returns it serialized as UTF-8. Raises
        SchemaError if the job has no project-properties.
        """
        self.changes = list()
        root = doc.getroot()
        # The root element name varies by project type (project, matrix-project,
        # etc.). The elements below are common to all of them.

        cascadingParentN = root.find("cascadingProjectName")
        if cascadingParentN is not None:
            self.fix_team_name(cascadingParentN, label="cascadingProjectName")

        cascadingChildrenN = root.find("cascadingChildrenNames")
        if cascadingChildrenN is not None:
            for stringN in cascadingChildrenN.findall("string"):
                self.fix_team_name(stringN, label="cascadingChildrenNames")

        propertiesN = root.find("project-properties")
        if propertiesN is None:
            raise SchemaError("Project has no project-properties")

        removeL = list()
        for entryN in propertiesN.findall("entry"):
            kind = PropertyKind.from_key(self.entry_key(entryN))
            if kind is None:
                continue
            if kind.handler().fix(entryN, self):
                removeL.append(entryN)

        for entryN in removeL:
            propertiesN.remove(entryN)
            self.changes.append(f"{self.entry_key(entryN)}: removed")

        return self.serialize(doc)

    def rewrite_bytes(self, xml: bytes) -> bytes:
        try:
            doc = etree.parse(BytesIO(xml))
        except etree.XMLSyntaxError as e:
            raise ParseError(f"Unable to parse document: {e}") from e
        return self.rewrite(doc)

    def rewrite_file(self, *, path) -> bytes:
        path = Path(path)
        try:
            with open(path, "rb") as f:
                doc = etree.parse(f)
        except FileNotFoundError as e:
            raise NotFound(f"File not found: {path}") from e
        except etree.XMLSyntaxError as e:
            raise ParseError(f"Unable to parse document: {path}") from e
        except OSError as e:
            raise ReadError(f"Unable to read document: {path}: {e}") from e
        return self.rewrite(doc)

    def serialize(self, doc: etree._ElementTree) -> bytes:
        try:
            return etree.tostring(doc, xml_declaration=True, encoding="UTF-8")
        except (etree.SerialisationError, ValueError) as e:
            raise WriteError(f"Document write failed: {e}") from e

    #
    # helpers used by the property handlers
    #

    def entry_key(self, entryN) -> Optional[str]:
        stringN = entryN.find("string")
        if stringN is None:
            return None
        return (stringN.text or "").strip()

    def swap(self, name: str) -> str:
        return swap_prefix(name, self.old_prefix, self.new_prefix)

    def fix_team_name(self, node, *, label: str) -> bool:
        """
        Requalifies the text of node if it starts with the old team prefix.
        The text is only written if it changes.
        """
        if node is None:
            return False
        name = (node.text or "").strip()
        new = self.swap(name)
        if new == name:
            return False
        node.text = new
        self.changes.append(f"{label}: {name} -> {new}")
        return True
