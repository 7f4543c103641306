"""Domain exceptions."""


class QuranAuthzError(Exception):
    """Base exception for quran-authz."""

    pass


class ValidationError(QuranAuthzError):
    """A permission condition failed authoring-time validation."""

    pass


class UnknownAttribute(ValidationError):
    """Condition name is not a known model attribute."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown attribute: {name!r}")
        self.name = name


class MalformedConditionValue(ValidationError):
    """Literal looks like a typed value but is malformed for that type."""

    pass


class ConditionTypeMismatch(ValidationError):
    """Condition value type differs from the attribute's declared type."""

    pass


class ResolutionError(QuranAuthzError):
    """Attribute could not be resolved against the requested resource."""

    pass


class ResourceNotFound(ResolutionError):
    """Requested resource does not exist."""

    pass


class AttributeUnavailableForResourceKind(ResolutionError):
    """Attribute does not apply to the requested resource kind."""

    pass


class AttributeValueMissing(ResolutionError):
    """Resource exists but has no value for the attribute."""

    pass


class PersistenceFailure(QuranAuthzError):
    """Permission store or resource lookup failed."""

    pass
