"""SSD1306 OLED controller driven over an I2C bus."""

from typing import Iterable, Protocol

from picosynth.framebuffer import FULL_SCREEN, Framebuffer, RenderArea

I2C_ADDRESS = 0x3C
I2C_CLOCK_KHZ = 400

COMMAND_PREFIX = 0x80
DATA_PREFIX = 0x40

SET_MEM_ADDR_MODE = 0x20
SET_COLUMN_ADDR = 0x21
SET_PAGE_ADDR = 0x22
SET_DISP_START_LINE = 0x40
SET_CONTRAST = 0x81
SET_SEGMENT_REMAP = 0xA0
SET_ENTIRE_ON = 0xA4
SET_NORM_INV = 0xA6
SET_DISP = 0xAE
SET_COM_OUT_DIR = 0xC0
SET_COM_PIN_CFG = 0xDA
SET_DISP_CLK_DIV = 0xD5
SET_PRECHARGE = 0xD9
SET_VCOM_DESEL = 0xDB
SET_CHARGE_PUMP = 0x8D

INIT_SEQUENCE: tuple[int, ...] = (
    SET_DISP | 0x00,  # display off
    SET_MEM_ADDR_MODE,
    0x00,  # horizontal addressing
    SET_DISP_START_LINE | 0x00,
    SET_SEGMENT_REMAP | 0x01,
    SET_COM_OUT_DIR | 0x08,
    SET_COM_PIN_CFG,
    0x12,
    SET_CONTRAST,
    0x7F,
    SET_ENTIRE_ON,
    SET_NORM_INV,
    SET_DISP_CLK_DIV,
    0x80,
    SET_PRECHARGE,
    0xF1,
    SET_VCOM_DESEL,
    0x30,
    SET_CHARGE_PUMP,
    0x14,
    SET_DISP | 0x01,  # display on
)


class I2CBus(Protocol):
    """Anything able to perform a blocking write to an I2C device."""

    def write(self, address: int, data: bytes) -> None: ...


class SSD1306:
    """Sends commands and display memory to an SSD1306 controller."""

    def __init__(self, bus: I2CBus, address: int = I2C_ADDRESS) -> None:
        self.bus = bus
        self.address = address

    def send_cmd(self, cmd: int) -> None:
        """Send one command byte."""
        self.bus.write(self.address, bytes((COMMAND_PREFIX, cmd)))

    def send_data(self, data: bytes) -> None:
        """Send a block of display memory."""
        self.bus.write(self.address, bytes((DATA_PREFIX,)) + bytes(data))

    def send_cmd_list(self, cmds: Iterable[int]) -> None:
        """Send each command as its own transfer."""
        for cmd in cmds:
            self.send_cmd(cmd)

    def init(self) -> None:
        """Run the power-up configuration sequence."""
        self.send_cmd_list(INIT_SEQUENCE)

    def render(self, framebuffer: Framebuffer, area: RenderArea = FULL_SCREEN) -> None:
        """Set the address window to the area and send the framebuffer contents."""
        self.send_cmd_list(
            (
                SET_COLUMN_ADDR,
                area.start_column,
                area.end_column,
                SET_PAGE_ADDR,
                area.start_page,
                area.end_page,
            )
        )
        self.send_data(bytes(framebuffer.buffer[: area.buffer_length()]))