class ViewerError(Exception):
    """Base class for errors that abort a viewer run."""


class ImageLoadError(ViewerError):
    """The image file is missing, unreadable or not a decodable image."""
