class PersistenceError(Exception):
    """Raised when the rates batch cannot be written to the datastore."""
