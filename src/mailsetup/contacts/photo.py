# =============================================================================
# Contact Photos
# =============================================================================
# Looks up a contact by email address and decodes their photo.
#
# Two collaborators, both fallible I/O:
#   - a ContactDirectory that maps an email address to a photo reference
#   - an opener that turns the reference into a binary stream
#
# A missing photo is normal, and a broken one is not worth interrupting the
# user for: every failure here ends in "no photo" (None) plus a log entry.
# =============================================================================

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Protocol

if TYPE_CHECKING:
    from PIL import Image

logger = logging.getLogger(__name__)

# Opens a photo reference for reading
StreamOpener = Callable[[str], BinaryIO]


class ContactDirectory(Protocol):
    """Anything that can find a contact's photo reference by email address."""

    def get_photo_uri(self, email_address: str) -> str | None:
        """Returns the photo reference for the contact, or None."""
        ...


class InMemoryContactDirectory:
    """
    A ContactDirectory backed by a plain mapping.

    Email addresses are matched case-insensitively.

    Usage:
        >>> directory = InMemoryContactDirectory({"jane@example.com": "/photos/jane.png"})
        >>> directory.get_photo_uri("Jane@Example.com")
        '/photos/jane.png'
    """

    def __init__(self, photos: Mapping[str, str] | None = None) -> None:
        self._photos = {
            address.strip().lower(): uri for address, uri in (photos or {}).items()
        }

    def get_photo_uri(self, email_address: str) -> str | None:
        return self._photos.get(email_address.strip().lower())


def open_local_file(uri: str) -> BinaryIO:
    """Default opener: treat the reference as a path on disk."""
    return Path(uri).open("rb")


class ContactPhotoLoader:
    """
    Loads contact photos as Pillow images.

    Usage:
        >>> loader = ContactPhotoLoader(directory)
        >>> image = loader.load_contact_photo("jane@example.com")
        >>> if image is not None:
        ...     print(image.size)
    """

    def __init__(
        self,
        contact_directory: ContactDirectory,
        opener: StreamOpener | None = None,
    ) -> None:
        """
        Args:
            contact_directory: Where to look up photo references.
            opener: Opens a reference as a binary stream. Defaults to
                    opening it as a local file path.
        """
        self.contact_directory = contact_directory
        self.opener = opener or open_local_file

    def load_contact_photo(self, email_address: str) -> "Image.Image | None":
        """
        Load the photo of the contact with this email address.

        Returns:
            The decoded image, or None if there is no contact, no photo,
            or the photo couldn't be read or decoded.
        """
        try:
            photo_uri = self.contact_directory.get_photo_uri(email_address)
        except Exception as e:
            logger.error(f"Couldn't look up contact {email_address}: {e}", exc_info=True)
            return None
        if photo_uri is None:
            return None

        from PIL import Image

        try:
            with self.opener(photo_uri) as stream:
                image = Image.open(stream)
                # Pillow decodes lazily; force it while the stream is open
                image.load()
                return image
        except Exception as e:
            logger.error(f"Couldn't load contact photo: {photo_uri}: {e}", exc_info=True)
            return None
