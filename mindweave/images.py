"""Images attached to nodes and the registry that numbers them."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field

_log = logging.getLogger(__name__)


@dataclass
class Image:
    """Raw image bytes together with the path they came from."""

    data: bytes = b""
    path: str = ""
    id: int = 0


@dataclass
class ImageManager:
    """Holds images by id; ids are positive and handed out in increasing order."""

    _images: dict[int, Image] = field(default_factory=dict, repr=False)
    _count: int = 0

    def clear(self) -> None:
        """Forget every image and restart numbering."""
        _log.debug("Clearing ImageManager")
        self._images.clear()
        self._count = 0

    def add_image(self, image: Image) -> int:
        """Store a copy of ``image`` under a new id and return that id."""
        self._count += 1
        image_id = self._count
        self._images[image_id] = dataclasses.replace(image, id=image_id)
        _log.debug("Adding new image, path=%s, id=%d", image.path, image_id)
        return image_id

    def set_image(self, image: Image) -> None:
        """Store a copy of ``image`` under its own id, which must be positive."""
        if not image.id:
            raise ValueError("Image must have id > 0 !")
        self._count = max(image.id, self._count)
        self._images[image.id] = dataclasses.replace(image)
        _log.debug("Setting image, path=%s, id=%d", image.path, image.id)

    def get_image(self, image_id: int) -> Image | None:
        """Return the image with ``image_id``, or None if there is none."""
        return self._images.get(image_id)

    def images(self) -> list[Image]:
        """Return all images ordered by id."""
        return [self._images[key] for key in sorted(self._images)]