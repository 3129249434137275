"""
Pillow glue: hash PIL images or image files.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from .encoder import encode_rgb

logger = logging.getLogger(__name__)


def encode_image(
    image: Union[Image.Image, str, Path],
    components_x: Optional[int] = None,
    components_y: Optional[int] = None,
) -> str:
    """
    Calculate the blurhash of a PIL image or of the image file at a path.

    Any mode is converted to RGB first; alpha is discarded.
    """
    if isinstance(image, (str, Path)):
        with Image.open(image) as opened:
            return encode_image(opened, components_x, components_y)

    if image.mode != "RGB":
        logger.debug("Converting %s image to RGB", image.mode)
        image = image.convert("RGB")

    width, height = image.size
    return encode_rgb(image.tobytes(), width, height, components_x, components_y)
