"""Exception hierarchy for taxonomy loading, resolution, and ancestry walks."""


class LanguageFamilyError(Exception):
    """Base class for all language-family engine errors."""


class TaxonomyNotReadyError(LanguageFamilyError):
    """Raised by lookups while the taxonomy is not loaded (or failed to load)."""


class TaxonomyLoadError(LanguageFamilyError):
    """Raised when a load is attempted on a store that already started loading."""


class UnresolvableIdentifierError(LanguageFamilyError):
    """A locale tag could not be mapped to any taxonomy node, even after fallback."""

    def __init__(self, tag: str, code: str | None = None) -> None:
        self.tag = tag
        self.code = code
        detail = f" (external code {code!r})" if code else ""
        super().__init__(f"No taxonomy node for identifier {tag!r}{detail}")


class CycleDetectedError(LanguageFamilyError):
    """An ancestry walk revisited a node or exceeded the depth bound."""

    def __init__(self, node_id: str, depth: int) -> None:
        self.node_id = node_id
        self.depth = depth
        super().__init__(f"Ancestry walk from {node_id!r} did not reach a root within {depth} steps")


class MalformedRecordError(LanguageFamilyError):
    """A taxonomy row is missing a required field."""

    def __init__(self, line_no: int, reason: str) -> None:
        self.line_no = line_no
        self.reason = reason
        super().__init__(f"Line {line_no}: {reason}")
