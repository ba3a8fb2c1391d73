"""Space-time diagrams of machine runs.

Each recorded snapshot becomes one pixel row and each tape cell one pixel
column. Rows are aligned on the tape's original left edge, so a cell keeps
its column while the tape grows on either side.
"""

from dataclasses import dataclass
from typing import Any, Optional

try:
    from PIL import Image, ImageDraw, ImageFont
    from matplotlib.font_manager import FontProperties, findfont
except ImportError as e:
    raise ImportError(
        "Pillow and matplotlib are required for frame rendering. "
        "Install with: pip install pillow matplotlib"
    ) from e

RESOLUTION_TINY = (320, 180)    # Tiny (320x180)
RESOLUTION_2K = (1920, 1080)    # 2K (1920x1080, Full HD)

DEFAULT_COLORS = ["#FFFFFF", "#FF5500"]


@dataclass(frozen=True)
class TapeRow:
    """Copied tape contents at one step."""

    step_index: int
    left_growth: int
    cells: tuple
    head: int
    blank: Any = None


class TapeHistory:
    """Collects copies of machine peeks for rendering.

    Example:
        >>> from tape_automaton import Machine, Move, Rule
        >>> machine = Machine("A", [False])
        >>> history = TapeHistory()
        >>> history.record(machine.peek())
        >>> _ = machine.step(lambda state, symbol: Rule(write=True, head_move=Move.LEFT))
        >>> history.record(machine.peek())
        >>> history.to_image().size
        (2, 2)
    """

    def __init__(self):
        self.rows = []

    def __len__(self):
        return len(self.rows)

    def record(self, peek, step_index: Optional[int] = None) -> None:
        front, back = peek.tape
        if step_index is None:
            step_index = len(self.rows)
        self.rows.append(
            TapeRow(
                step_index=step_index,
                left_growth=len(front),
                cells=tuple(front) + tuple(back),
                head=peek.head,
                blank=peek.blank,
            )
        )

    def to_image(self, colors: Optional[list] = None, blank=None) -> Image.Image:
        """Render the recorded rows as an RGB image.

        Args:
            colors: Hex color strings. The first is used for blank cells;
                other symbols take the remaining colors in order of first
                appearance, cycling if there are fewer colors than symbols.
            blank: Blank symbol. Defaults to the blank each row was recorded
                with, i.e. the machine's own blank.

        Raises:
            ValueError: If nothing has been recorded.
        """
        if not self.rows:
            raise ValueError("No tape rows recorded")
        colors = colors or DEFAULT_COLORS
        palette = [_hex_to_rgb(color) for color in colors]
        origin = max(row.left_growth for row in self.rows)
        width = max(origin - row.left_growth + len(row.cells) for row in self.rows)
        image = Image.new("RGB", (width, len(self.rows)), palette[0])

        symbol_colors = {}
        ink = palette[1:] or palette
        for y, row in enumerate(self.rows):
            offset = origin - row.left_growth
            row_blank = row.blank if blank is None else blank
            for x, symbol in enumerate(row.cells):
                if symbol == row_blank:
                    continue
                if symbol not in symbol_colors:
                    symbol_colors[symbol] = ink[len(symbol_colors) % len(ink)]
                image.putpixel((offset + x, y), symbol_colors[symbol])
        return image


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    color = color.lstrip("#")
    if len(color) != 6:
        raise ValueError(f"Expected a #RRGGBB color, got {color!r}")
    return tuple(int(color[i : i + 2], 16) for i in (0, 2, 4))


def create_frame(
    image: Image.Image,
    caption: str,
    step_index: int,
    resolution: tuple[int, int],
    font_size: Optional[int] = None,
) -> Image.Image:
    """Resize a space-time image and add a step caption.

    The caption shows the 1-based step count followed by ``caption`` in the
    bottom-right corner.

    Args:
        image: Image from ``TapeHistory.to_image``
        caption: Text to display (appended to step count)
        step_index: Current step number (0-based)
        resolution: Target (width, height) in pixels
        font_size: Font size override (auto-scaled by default based on height)

    Returns:
        RGBA PIL Image ready to save
    """
    width, height = resolution

    # Diagrams are usually tiny, so keep cells crisp
    if image.size != (width, height):
        if image.width > width:
            image = image.resize((width, height), Image.LANCZOS)
        else:
            image = image.resize((width, height), Image.NEAREST)
    base = image.convert("RGBA")

    # Compute scale factor based on 1920x1080 reference (vertical dimension)
    scale_factor = height / 1080.0

    text = f"{step_index + 1:,} {caption}".strip()

    if font_size is None:
        font_size = max(1, int(50.0 * scale_factor))

    try:
        font_path = findfont(FontProperties(family="monospace"))
        font = ImageFont.truetype(font_path, font_size)
    except (OSError, ValueError):
        font = ImageFont.load_default()

    draw = ImageDraw.Draw(base)
    bbox = draw.textbbox((0, 0), text, font=font)
    text_width = bbox[2] - bbox[0]

    # Digits only, so commas don't move the baseline
    ref_bbox = draw.textbbox((0, 0), "0123456789", font=font)
    text_height = ref_bbox[3] - ref_bbox[1]

    horizontal_padding = int(25.0 * scale_factor)
    vertical_padding = int(10.0 * scale_factor)

    x_position = width - horizontal_padding - text_width
    y_position = height - vertical_padding - text_height - int(10.0 * scale_factor)

    draw.text((x_position, y_position), text, font=font, fill=(110, 110, 110, 255))
    return base
