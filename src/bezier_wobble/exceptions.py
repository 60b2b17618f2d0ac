class CanvasUnavailableError(Exception):
    """Drawing surface could not be created at startup."""
    def __init__(self, message="Rendering surface is unavailable."):
        super().__init__(message)
