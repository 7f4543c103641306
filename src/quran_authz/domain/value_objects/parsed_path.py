"""Request path decomposition into resource kind, id and method."""

from dataclasses import dataclass
from uuid import UUID

from quran_authz.domain.value_objects.resource_kind import ResourceKind

# Route tokens in addition to the kind values themselves.
_ROUTE_TOKENS: dict[str, ResourceKind] = {
    "surah": ResourceKind.QURAN_SURAH,
    "ayah": ResourceKind.QURAN_AYAH,
    "word": ResourceKind.QURAN_WORD,
    "org": ResourceKind.ORGANIZATION,
}


def _kind_for(token: str) -> ResourceKind:
    if token in _ROUTE_TOKENS:
        return _ROUTE_TOKENS[token]
    try:
        kind = ResourceKind(token)
    except ValueError:
        return ResourceKind.UNKNOWN
    return kind


def _parse_id(segment: str) -> UUID | None:
    try:
        return UUID(segment)
    except ValueError:
        return None


@dataclass(frozen=True)
class ParsedPath:
    """Object and action keys of one request."""

    resource_kind: ResourceKind
    resource_id: UUID | None
    method: str

    @classmethod
    def from_request(cls, raw_path: str, method: str = "GET", prefix: str = "") -> "ParsedPath":
        """Split a raw URL path. Never fails; unrecognized paths are UNKNOWN."""
        path = raw_path.split("?", 1)[0]
        prefix = prefix.rstrip("/")
        if prefix and (path == prefix or path.startswith(prefix + "/")):
            path = path[len(prefix):]

        segments = [s for s in path.split("/") if s]
        if not segments:
            return cls(ResourceKind.UNKNOWN, None, method.upper())

        kind = _kind_for(segments[0])
        resource_id = _parse_id(segments[1]) if len(segments) > 1 else None
        return cls(kind, resource_id, method.upper())


def parse_path(raw_path: str, method: str = "GET", prefix: str = "") -> ParsedPath:
    """Shorthand for ParsedPath.from_request."""
    return ParsedPath.from_request(raw_path, method, prefix)
