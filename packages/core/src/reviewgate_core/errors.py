class ReviewGateError(Exception):
    """A fatal condition the run must report as a failure."""
