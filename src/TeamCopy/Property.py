from abc import ABC, abstractmethod


class Property(ABC):
    """
    Handler for one kind of entry in project-properties:

        <entry>
          <string>{key}</string>
          ...
        </entry>
    """

    key: str

    @abstractmethod
    def fix(self, entryN, rewriter) -> bool:
        """
        Changes entryN in place. Returns True if the whole entry should be
        removed; the rewriter does that after it has seen all entries.
        """
        pass
