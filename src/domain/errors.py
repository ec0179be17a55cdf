class DuplicateKeyError(Exception):
    """Raised by repositories when a store-level unique constraint is violated."""

    def __init__(self, field: str, value=None):
        self.field = field
        self.value = value
        super().__init__(f"Duplicate value for {field}")
