"""Errors that abort processing of a single item."""


class PatchError(Exception):
    """Raised when an item cannot be patched in; the rest of the batch continues."""

    def __init__(self, item_id: str, message: str):
        super().__init__(f"{item_id}: {message}")
        self.item_id = item_id


class BarterCurrencyError(PatchError):
    """Raised when a barter scheme names a currency that resolves to nothing."""

    def __init__(self, item_id: str, currency: str):
        super().__init__(item_id, f"Invalid _tpl value in barterScheme: '{currency}'")
        self.currency = currency


class CloneSourceError(PatchError):
    """Raised when the template to clone is not in the host database."""

    def __init__(self, item_id: str, source_tpl: str):
        super().__init__(item_id, f"Template to clone not found: '{source_tpl}'")
        self.source_tpl = source_tpl
