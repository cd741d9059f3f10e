class InstantError(ValueError):
    """Raised for input the date engine cannot interpret as an instant."""
