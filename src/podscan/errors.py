"""Custom exceptions for podscan."""


class PodscanError(Exception):
    """Base exception for all podscan errors."""

    pass


class FeedError(PodscanError):
    """Feed parsing errors."""

    pass


class FeedUnusableError(FeedError):
    """Feed text could not be turned into a podcast."""

    pass


class UnparseableLinkError(FeedError):
    """Item block carries neither an enclosure url nor a link."""

    pass


class InvalidURIError(PodscanError, ValueError):
    """Episode audio link is missing or malformed."""

    pass


class LibraryError(PodscanError):
    """Library lookup and playback bookkeeping errors."""

    pass


class PodcastNotFoundError(LibraryError, LookupError):
    """Podcast title not present in the library."""

    pass


class EpisodeNotFoundError(LibraryError, LookupError):
    """Episode title not present in its podcast."""

    pass


class NoEpisodeSelectedError(LibraryError):
    """Playback position recorded before any episode was selected."""

    pass
