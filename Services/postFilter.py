from dataclasses import dataclass
from typing import Optional


def _clean(value):
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class PostFilter:
    """Optional listing predicates, AND-combined.

    ``type`` and ``category`` match exactly after lowercasing; ``location``
    matches as a case-insensitive substring.
    """
    type: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None

    @classmethod
    def from_args(cls, args):
        """Build a filter from a query-string mapping, ignoring blank values."""
        return cls(
            type=_clean(args.get("type")),
            category=_clean(args.get("category")),
            location=_clean(args.get("location"))
        )

    @property
    def is_empty(self):
        return not (self.type or self.category or self.location)

    def to_query(self) -> dict:
        """Translate active predicates into mongoengine query kwargs."""
        query = {}
        if self.type:
            query["type"] = self.type.lower()
        if self.category:
            query["category"] = self.category.lower()
        if self.location:
            # icontains escapes regex metacharacters
            query["location__icontains"] = self.location
        return query
