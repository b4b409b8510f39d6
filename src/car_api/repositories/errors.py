"""Raw store conditions raised by repositories.

These describe what the store observed, not what it means for the API;
the service layer decides how to translate them.
"""


class NoRowsError(Exception):
    """A single-row lookup matched nothing."""

    def __init__(self, message: str = "no rows in result set") -> None:
        super().__init__(message)


class RowsAffectedError(Exception):
    """A write affected a row count other than exactly one."""

    def __init__(self, affected: int) -> None:
        self.affected = affected
        super().__init__(f"weird behavior, total affected: {affected}")
