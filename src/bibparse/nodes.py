"""Typed records produced by the entry parser.

Entries are frozen dataclasses with slots. ``fields`` keeps insertion
order; field names are lower-cased and values fully macro-expanded.

Thread Safety:
Entry is frozen. Treat ``fields`` as read-only when sharing entries.

"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Entry:
    """One bibliographic record.

    Attributes:
        type: Entry type as written (``article``, ``Book``)
        key: Citation key, case preserved
        fields: Lower-cased field name -> expanded string value

    Examples:
        >>> entry = Entry("article", "knuth84", {"year": "1984"})
        >>> entry.fields["year"]
        '1984'

    """

    type: str
    key: str
    fields: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        """Plain mapping with ``type``, ``key`` and ``fields``."""
        return {"type": self.type, "key": self.key, "fields": dict(self.fields)}
