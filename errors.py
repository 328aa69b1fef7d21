class SimulationError(Exception):
    pass


class ConfigError(SimulationError, ValueError):
    """Frame/page counts or raw simulation input are unusable."""


class InvalidPageError(SimulationError, ValueError):
    """A reference outside [0, num_pages). The step is rejected untouched."""

    def __init__(self, page, num_pages):
        self.page = page
        self.num_pages = num_pages
        super().__init__(
            f"Invalid page {page!r} (must be in [0, {num_pages - 1}])")


class InternalConsistencyError(SimulationError, RuntimeError):
    """Engine state is corrupted. Never raised for valid input."""
