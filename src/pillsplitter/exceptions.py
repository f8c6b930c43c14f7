"""Exception hierarchy for Pill Splitter."""


class PillSplitterError(Exception):
    """Base exception for all Pill Splitter errors."""

    pass


class GeometryError(PillSplitterError):
    """Errors in pill geometry."""

    pass


class InvalidPillError(GeometryError):
    """Pill bounds or corner radii are not valid."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid pill: {reason}")


class StoreError(PillSplitterError):
    """Errors related to the pill collection."""

    pass


class PillNotFoundError(StoreError):
    """Requested pill is not in the store."""

    def __init__(self, pill_id: int) -> None:
        self.pill_id = pill_id
        super().__init__(f"Pill {pill_id} not found in store")


class PillPatchError(StoreError):
    """Patch names a field that cannot be updated in place."""

    def __init__(self, pill_id: int, fields: list[str]) -> None:
        self.pill_id = pill_id
        self.fields = fields
        super().__init__(
            f"Cannot patch {', '.join(sorted(fields))} on pill {pill_id}"
        )


class ScriptError(PillSplitterError):
    """Errors related to pointer-event scripts."""

    pass


class ScriptLoadError(ScriptError):
    """Error loading an event script file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load script '{path}': {reason}")


class ScriptEventError(ScriptError):
    """Event record in a script is not understood."""

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Bad event #{index}: {reason}")
