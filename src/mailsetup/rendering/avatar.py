# =============================================================================
# Avatar Rendering
# =============================================================================
# Draws a small image (a contact photo) with plain text cells so it shows up
# in any terminal, no graphics protocol needed.
#
# Each cell is the upper half block "▀": its foreground colour is the top
# pixel and its background colour the bottom pixel, so one row of cells
# covers two rows of pixels.
# =============================================================================

from typing import TYPE_CHECKING

from rich.style import Style
from rich.text import Text

if TYPE_CHECKING:
    from PIL import Image

HALF_BLOCK = "▀"


def fit_size(width: int, height: int, max_cols: int, max_rows: int) -> tuple[int, int]:
    """
    Scale (width, height) pixels to fit max_cols x max_rows cells.

    Keeps the aspect ratio. A cell is two pixels tall, so the pixel budget is
    max_cols x (2 * max_rows). Never scales up, and never goes below 1x2.

    Returns:
        The target (pixel_width, pixel_height). The height is always even.
    """
    max_w = max_cols
    max_h = max_rows * 2
    ratio = min(max_w / width, max_h / height, 1.0)

    new_width = max(1, int(width * ratio))
    new_height = max(2, int(height * ratio))
    # Round down to a whole number of cells
    new_height -= new_height % 2
    return new_width, new_height


def render_avatar(image: "Image.Image", max_cols: int = 16, max_rows: int = 8) -> Text:
    """
    Render an image as half-block text.

    Args:
        image: Any Pillow image; converted to RGB first.
        max_cols: Maximum width in terminal cells.
        max_rows: Maximum height in terminal rows.

    Returns:
        A rich Text, one line per cell row.
    """
    rgb = image.convert("RGB")
    size = fit_size(rgb.width, rgb.height, max_cols, max_rows)
    if size != rgb.size:
        rgb = rgb.resize(size)

    width, height = rgb.size
    pixels = rgb.load()

    text = Text()
    for y in range(0, height, 2):
        if y:
            text.append("\n")
        for x in range(width):
            top = pixels[x, y]
            bottom = pixels[x, y + 1]
            text.append(
                HALF_BLOCK,
                style=Style(color=_hex(top), bgcolor=_hex(bottom)),
            )
    return text


def _hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)
