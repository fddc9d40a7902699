"""Custom exceptions for norgrefile."""


class RefileError(Exception):
    """Base exception for refiling operations."""


class RefileNotice(RefileError):
    """Non-fatal condition: the operation aborts and the user is told why."""


class NoRefilableNodeError(RefileNotice):
    """No heading or list item encloses the requested position."""


class PickerUnavailableError(RefileNotice):
    """No interactive target picker is available in this host."""


class TargetNotFoundError(RefileError):
    """The target heading does not exist in the target document."""


class AmbiguousTargetError(TargetNotFoundError):
    """More than one heading matches the target in strict mode."""


class InconsistentTreeError(RefileError):
    """The parse tree violates a structural invariant."""


class HeadingDepthError(RefileError):
    """Renumbered headings would exceed the maximum supported depth."""


class SelfRefileError(RefileError):
    """The target heading lies inside the node being moved."""


class DocumentAccessError(RefileError):
    """A document cannot be opened, read, or written."""


class ReindentError(RefileError):
    """The reindentation pass failed."""
