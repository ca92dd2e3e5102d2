"""Monochrome page-organised framebuffer for a 128x64 SSD1306 panel."""

from dataclasses import dataclass

from picosynth.font import CHAR_SPACING, FONT_HEIGHT, FONT_WIDTH, glyph

WIDTH = 128
HEIGHT = 64
PAGES = 8
BUFFER_LENGTH = (WIDTH * HEIGHT) // 8


@dataclass(frozen=True)
class RenderArea:
    """A rectangle of columns and pages sent to the display in one transfer."""

    start_column: int = 0
    end_column: int = WIDTH - 1
    start_page: int = 0
    end_page: int = PAGES - 1

    def buffer_length(self) -> int:
        """Number of bytes of display memory the area covers."""
        return (self.end_column - self.start_column + 1) * (
            self.end_page - self.start_page + 1
        )


FULL_SCREEN = RenderArea()


class Framebuffer:
    """In-memory image of the display, one bit per pixel, eight rows per byte."""

    def __init__(self) -> None:
        self.buffer = bytearray(BUFFER_LENGTH)

    def __bytes__(self) -> bytes:
        return bytes(self.buffer)

    def clear(self) -> None:
        """Turn every pixel off."""
        self.buffer[:] = bytes(BUFFER_LENGTH)

    @staticmethod
    def _locate(x: int, y: int) -> tuple[int, int] | None:
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            return None
        return x + (y // 8) * WIDTH, 1 << (y % 8)

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether the pixel is lit; pixels off the panel read as off."""
        location = self._locate(x, y)
        if location is None:
            return False
        index, mask = location
        return bool(self.buffer[index] & mask)

    def draw_pixel(self, x: int, y: int, color: bool) -> None:
        """Set or clear one pixel; coordinates off the panel are ignored."""
        location = self._locate(x, y)
        if location is None:
            return
        index, mask = location
        if color:
            self.buffer[index] |= mask
        else:
            self.buffer[index] &= ~mask & 0xFF

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: bool) -> None:
        """Draw a straight line with Bresenham's algorithm."""
        steep = abs(y1 - y0) > abs(x1 - x0)
        if steep:
            x0, y0 = y0, x0
            x1, y1 = y1, x1
        if x0 > x1:
            x0, x1 = x1, x0
            y0, y1 = y1, y0

        dx = x1 - x0
        dy = abs(y1 - y0)
        err = dx // 2
        ystep = 1 if y0 < y1 else -1
        y = y0
        for x in range(x0, x1 + 1):
            if steep:
                self.draw_pixel(y, x, color)
            else:
                self.draw_pixel(x, y, color)
            err -= dy
            if err < 0:
                y += ystep
                err += dx

    def draw_string(self, x: int, y: int, text: str) -> None:
        """Draw text in the built-in font, wrapping back to x when a line fills."""
        cursor_x, cursor_y = x, y
        for char in text:
            for column_offset, column in enumerate(glyph(char)):
                for row in range(FONT_HEIGHT):
                    if column & (1 << row):
                        self.draw_pixel(cursor_x + column_offset, cursor_y + row, True)
            cursor_x += FONT_WIDTH + CHAR_SPACING
            if cursor_x > WIDTH - FONT_WIDTH:
                cursor_x = x
                cursor_y += FONT_HEIGHT + 1

    def draw_vertical_bar(self, x: int, height: int, color: bool) -> None:
        """Draw a bar rising from the bottom edge, clipped to the panel height."""
        if not 0 <= x < WIDTH:
            return
        height = min(height, HEIGHT)
        for y in range(HEIGHT - 1, HEIGHT - height - 1, -1):
            self.draw_pixel(x, y, color)