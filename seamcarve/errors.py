"""
Exception types raised by the carving pipeline.

Every error carries the name of the stage that failed so a caller
(usually the CLI) can report where the run stopped.
"""


class SeamCarveError(Exception):
    """Base class for all seam carving failures."""

    stage = 'carve'

    def __init__(self, message: str, stage: str = None):
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class CarveConfigError(SeamCarveError, ValueError):
    """Invalid carve request, detected before any seam is removed."""

    stage = 'configure'


class ResourceError(SeamCarveError):
    """A collaborator could not read or write an image file."""


class ImageLoadError(ResourceError):
    stage = 'load'


class ImageSaveError(ResourceError):
    stage = 'save'
