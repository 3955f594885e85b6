"""Fluent, validating builders for chat platform embeds."""

from fluent_embed.author import Author
from fluent_embed.embed import Embed
from fluent_embed.errors import (
    BuildError,
    BuilderFinalized,
    CollectionLimitReached,
    InvalidEnumValue,
    InvalidURL,
    LimitExceeded,
    ValueOutOfRange,
)
from fluent_embed.events import (
    BuilderEvent,
    BuilderEventType,
    BuilderObserver,
    ObservableMixin,
)
from fluent_embed.field import Field
from fluent_embed.footer import Footer
from fluent_embed.limits import DEFAULT_LIMITS, EmbedLimits
from fluent_embed.media import Image, Thumbnail, Video
from fluent_embed.protocols import BuilderProtocol
from fluent_embed.provider import Provider
from fluent_embed.schema import (
    EMBED_TYPES,
    RawAuthor,
    RawEmbed,
    RawField,
    RawFooter,
    RawImage,
    RawProvider,
    RawThumbnail,
    RawVideo,
)
from fluent_embed.sink import ErrorSink

# Lazy imports for optional dependencies (rich)
_RICH_NAMES = frozenset({"RichErrorObserver", "print_errors", "render_errors"})


def __getattr__(name: str) -> object:
    """Lazy import for optional dependencies.

    The Rich reporting helpers require the optional 'rich' package and are
    only loaded when first accessed.

    Args:
        name: The attribute name being accessed.

    Returns:
        The requested object from the rich_reporter module.

    Raises:
        ImportError: If rich is not installed and a Rich helper is requested.
        AttributeError: If the requested attribute doesn't exist.
    """
    if name in _RICH_NAMES:
        try:
            import rich  # noqa: F401

            from fluent_embed import rich_reporter
        except ImportError as e:
            raise ImportError(
                f"{name} requires rich. Install with: pip install fluent-embed[rich]"
            ) from e
        return getattr(rich_reporter, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Builders
    "Author",
    "Embed",
    "Field",
    "Footer",
    "Image",
    "Provider",
    "Thumbnail",
    "Video",
    "BuilderProtocol",
    # Raw schema
    "EMBED_TYPES",
    "RawAuthor",
    "RawEmbed",
    "RawField",
    "RawFooter",
    "RawImage",
    "RawProvider",
    "RawThumbnail",
    "RawVideo",
    # Configuration
    "DEFAULT_LIMITS",
    "EmbedLimits",
    # Errors
    "BuildError",
    "BuilderFinalized",
    "CollectionLimitReached",
    "ErrorSink",
    "InvalidEnumValue",
    "InvalidURL",
    "LimitExceeded",
    "ValueOutOfRange",
    # Observer pattern
    "BuilderEvent",
    "BuilderEventType",
    "BuilderObserver",
    "ObservableMixin",
    # Rich reporting (lazy-loaded, requires rich optional dependency)
    "RichErrorObserver",
    "print_errors",
    "render_errors",
]

__version__ = "0.1.0"
