import pytest

from picosynth.display import (
    COMMAND_PREFIX,
    DATA_PREFIX,
    I2C_ADDRESS,
    INIT_SEQUENCE,
    SET_COLUMN_ADDR,
    SET_PAGE_ADDR,
    SSD1306,
)
from picosynth.framebuffer import BUFFER_LENGTH, FULL_SCREEN, Framebuffer, RenderArea


class RecordingBus:
    def __init__(self):
        self.writes = []

    def write(self, address, data):
        self.writes.append((address, bytes(data)))


@pytest.fixture
def bus():
    return RecordingBus()


def test_default_address_is_0x3c(bus):
    SSD1306(bus).send_cmd(0xAE)
    assert bus.writes[0][0] == 0x3C


def test_send_cmd_prefixes_command_byte(bus):
    SSD1306(bus).send_cmd(0xAF)
    assert bus.writes == [(I2C_ADDRESS, bytes((0x80, 0xAF)))]


def test_send_data_prefixes_data_byte(bus):
    SSD1306(bus, 0x3D).send_data(b"\x01\x02\x03")
    assert bus.writes == [(0x3D, b"\x40\x01\x02\x03")]


def test_send_cmd_list_sends_each_separately(bus):
    cmds = [0x21, 0x00, 0x7F]
    SSD1306(bus).send_cmd_list(cmds)
    assert [data for _, data in bus.writes] == [bytes((COMMAND_PREFIX, c)) for c in cmds]


def test_send_cmd_rejects_out_of_range_byte(bus):
    with pytest.raises(ValueError):
        SSD1306(bus).send_cmd(256)


def test_init_turns_display_off_then_on(bus):
    SSD1306(bus).init()
    sent = [data[1] for _, data in bus.writes]
    assert sent[0] == 0xAE
    assert sent[-1] == 0xAF
    assert sent == list(INIT_SEQUENCE)
    assert all(data[0] == COMMAND_PREFIX for _, data in bus.writes)


def test_render_full_screen_sends_window_then_buffer(bus):
    fb = Framebuffer()
    fb.draw_line(0, 0, 127, 63, True)
    SSD1306(bus).render(fb, FULL_SCREEN)
    commands = [data[1] for _, data in bus.writes[:6]]
    assert commands == [
        SET_COLUMN_ADDR,
        FULL_SCREEN.start_column,
        FULL_SCREEN.end_column,
        SET_PAGE_ADDR,
        FULL_SCREEN.start_page,
        FULL_SCREEN.end_page,
    ]
    assert len(bus.writes) == 7
    payload = bus.writes[-1][1]
    assert payload[0] == DATA_PREFIX
    assert payload[1:] == bytes(fb)
    assert len(payload) == BUFFER_LENGTH + 1


def test_render_partial_area_sends_leading_bytes(bus):
    fb = Framebuffer()
    fb.draw_string(0, 0, "Hi")
    area = RenderArea(start_column=0, end_column=15, start_page=0, end_page=1)
    SSD1306(bus).render(fb, area)
    payload = bus.writes[-1][1]
    assert payload[1:] == bytes(fb)[: area.buffer_length()]


def test_bus_errors_propagate():
    class FailingBus:
        def write(self, address, data):
            raise OSError("bus fault")

    with pytest.raises(OSError):
        SSD1306(FailingBus()).init()