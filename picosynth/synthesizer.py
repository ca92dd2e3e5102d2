"""Record-and-play state machine tying together buttons, microphone, buzzer, LED and display."""

import logging
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Protocol, Sequence

from picosynth.display import SSD1306
from picosynth.dsp import ADC_MAX_VALUE, PlaybackFilter, RecordFilter, _trunc_div
from picosynth.framebuffer import FULL_SCREEN, HEIGHT, WIDTH, Framebuffer

logger = logging.getLogger(__name__)

MIC_CHANNEL = 2
MIC_PIN = 26 + MIC_CHANNEL
BUZZER_PIN = 21
BUTTON_A_PIN = 5
BUTTON_B_PIN = 6
RED_LED_PIN = 13
GREEN_LED_PIN = 11
BLUE_LED_PIN = 12
I2C_SDA_PIN = 14
I2C_SCL_PIN = 15

SAMPLE_RATE = 11025
SAMPLE_INTERVAL_US = 1_000_000 // SAMPLE_RATE
MAX_RECORD_TIME_SEC = 5
BUFFER_SIZE = SAMPLE_RATE * MAX_RECORD_TIME_SEC

DEBOUNCE_MS = 200
DISPLAY_REFRESH_SAMPLES = 100
IDLE_SLEEP_MS = 10
PWM_SETTLE_MS = 10

IDLE_LINES = ("Sintetizador de Audio", "Pressione A: Gravar", "Pressione B: Tocar")


class SystemState(Enum):
    """What the synthesizer is currently doing."""

    IDLE = auto()
    RECORDING = auto()
    PLAYBACK = auto()


class Hardware(Protocol):
    """The board peripherals the synthesizer drives."""

    def gpio_put(self, pin: int, value: bool) -> None: ...

    def gpio_get(self, pin: int) -> bool: ...

    def adc_start(self) -> None: ...

    def adc_stop(self) -> None: ...

    def adc_drain(self) -> None: ...

    def adc_read(self) -> Optional[int]: ...

    def pwm_set_level(self, level: int) -> None: ...

    def pwm_set_enabled(self, enabled: bool) -> None: ...

    def sleep_ms(self, ms: int) -> None: ...


@dataclass
class ButtonDebouncer:
    """Reports a press on a falling edge, at most once per debounce window."""

    last_level: bool = True
    last_press_ms: int = 0

    def pressed(self, level: bool, now_ms: int) -> bool:
        """Feed the current pin level (low = pressed); return True on a new press."""
        level = bool(level)
        if level == self.last_level:
            return False
        self.last_level = level
        if level:
            return False
        if (now_ms - self.last_press_ms) & 0xFFFFFFFF > DEBOUNCE_MS:
            self.last_press_ms = now_ms
            return True
        return False


def _monotonic_us() -> int:
    return time.monotonic_ns() // 1000


class Synthesizer:
    """Records microphone audio on button A and plays it on the buzzer on button B."""

    def __init__(
        self,
        hardware: Hardware,
        display: SSD1306,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self.hardware = hardware
        self.display = display
        self.clock = clock or _monotonic_us
        self.state = SystemState.IDLE
        self.buffer: list[int] = []
        self.recorded_length = 0
        self.position = 0
        self.framebuffer = Framebuffer()
        self._record_filter = RecordFilter()
        self._playback_filter = PlaybackFilter()
        self._buttons = {BUTTON_A_PIN: ButtonDebouncer(), BUTTON_B_PIN: ButtonDebouncer()}
        self._last_sample_us = 0
        self._recording_start_us = 0

        self.set_led_color(False, False, False)
        hardware.adc_start()
        hardware.pwm_set_level(0)
        display.init()
        self.update_display(SystemState.IDLE)

    def set_led_color(self, red: bool, green: bool, blue: bool) -> None:
        """Switch each channel of the RGB LED."""
        self.hardware.gpio_put(RED_LED_PIN, red)
        self.hardware.gpio_put(GREEN_LED_PIN, green)
        self.hardware.gpio_put(BLUE_LED_PIN, blue)

    def start_recording(self) -> None:
        """Begin capturing audio; ignored unless idle."""
        if self.state is not SystemState.IDLE:
            return
        logger.info("Iniciando gravação...")
        self.buffer.clear()
        self.hardware.adc_drain()
        self.hardware.adc_stop()
        self.hardware.adc_start()
        self.state = SystemState.RECORDING
        self.set_led_color(True, False, False)
        self.update_display(SystemState.RECORDING)
        self._recording_start_us = self.clock()
        self._last_sample_us = self._recording_start_us

    def stop_recording(self) -> None:
        """Finish capturing audio; ignored unless recording."""
        if self.state is not SystemState.RECORDING:
            return
        logger.info("Gravação finalizada. %d amostras capturadas.", len(self.buffer))
        self.recorded_length = len(self.buffer)
        self.hardware.adc_stop()
        self.hardware.adc_drain()
        self.state = SystemState.IDLE
        self.set_led_color(False, False, False)
        self.update_display(SystemState.IDLE)

    def start_playback(self) -> None:
        """Begin playing the recording; ignored unless idle with something recorded."""
        if self.state is not SystemState.IDLE or self.recorded_length == 0:
            return
        logger.info("Iniciando reprodução...")
        self.state = SystemState.PLAYBACK
        self.set_led_color(False, True, False)
        self.update_display(SystemState.PLAYBACK)
        self.position = 0
        self._last_sample_us = self.clock()

    def stop_playback(self) -> None:
        """Silence the buzzer and return to idle; ignored unless playing."""
        if self.state is not SystemState.PLAYBACK:
            return
        logger.info("Reprodução finalizada.")
        self.hardware.pwm_set_level(0)
        self.hardware.pwm_set_enabled(False)
        self.hardware.sleep_ms(PWM_SETTLE_MS)
        self.hardware.pwm_set_enabled(True)
        self.state = SystemState.IDLE
        self.set_led_color(False, False, False)
        self.update_display(SystemState.IDLE)

    def update_display(self, state: SystemState) -> None:
        """Redraw the screen for the given state and send it to the panel."""
        fb = self.framebuffer
        fb.clear()
        if state is SystemState.IDLE:
            for y, line in zip((5, 20, 35), IDLE_LINES):
                fb.draw_string(5, y, line)
        elif state is SystemState.RECORDING:
            fb.draw_string(5, 5, "Gravando...")
            fb.draw_string(5, 20, "Tempo restante:")
            elapsed_us = self.clock() - self._recording_start_us
            remaining = max(0, MAX_RECORD_TIME_SEC - _trunc_div(elapsed_us, 1_000_000))
            fb.draw_string(5, 35, f"{remaining} segundos")
        elif state is SystemState.PLAYBACK:
            fb.draw_string(5, 5, "Reproduzindo...")
            if self.recorded_length > 0:
                self.draw_waveform(self.buffer[: self.recorded_length])
        self.display.render(fb, FULL_SCREEN)

    def draw_waveform(self, samples: Sequence[int]) -> None:
        """Plot up to one sample per column around a centre line."""
        if not samples:
            raise ValueError("no samples to draw")
        count = len(samples)
        shown = min(count, WIDTH)
        step = count // shown or 1
        max_height = HEIGHT // 2
        center_y = HEIGHT // 2
        half_scale = ADC_MAX_VALUE // 2

        fb = self.framebuffer
        fb.draw_line(0, center_y, WIDTH - 1, center_y, True)
        prev_y = center_y
        for x in range(shown):
            value = samples[min(x * step, count - 1)]
            offset = _trunc_div((value - half_scale) * max_height, half_scale)
            offset = max(-max_height, min(max_height, offset))
            y = center_y - offset
            if x > 0:
                fb.draw_line(x - 1, prev_y, x, y, True)
            else:
                fb.draw_pixel(x, y, True)
            prev_y = y

    def _button_pressed(self, pin: int) -> bool:
        now_ms = (self.clock() // 1000) & 0xFFFFFFFF
        return self._buttons[pin].pressed(self.hardware.gpio_get(pin), now_ms)

    def step(self) -> None:
        """Run one pass of the main loop: poll buttons, then service the current state."""
        if self._button_pressed(BUTTON_A_PIN):
            if self.state is SystemState.IDLE:
                self.start_recording()
            elif self.state is SystemState.RECORDING:
                self.stop_recording()

        if self._button_pressed(BUTTON_B_PIN):
            if self.state is SystemState.IDLE and self.recorded_length > 0:
                self.start_playback()
            elif self.state is SystemState.PLAYBACK:
                self.stop_playback()

        if self.state is SystemState.RECORDING:
            self._record_step()
        elif self.state is SystemState.PLAYBACK:
            self._playback_step()
        else:
            self.hardware.sleep_ms(IDLE_SLEEP_MS)

    def _record_step(self) -> None:
        if self.clock() - self._last_sample_us >= SAMPLE_INTERVAL_US:
            self._last_sample_us = self.clock()
            raw = self.hardware.adc_read()
            if raw is not None:
                sample = self._record_filter.process(raw)
                if len(self.buffer) < BUFFER_SIZE:
                    self.buffer.append(sample)
                else:
                    self.stop_recording()
            if len(self.buffer) % DISPLAY_REFRESH_SAMPLES == 0:
                self.update_display(SystemState.RECORDING)

        if self.clock() - self._recording_start_us >= MAX_RECORD_TIME_SEC * 1_000_000:
            self.stop_recording()

    def _playback_step(self) -> None:
        if self.clock() - self._last_sample_us < SAMPLE_INTERVAL_US:
            return
        self._last_sample_us = self.clock()
        if self.position >= self.recorded_length:
            self.stop_playback()
            return
        current = self.buffer[self.position]
        if self.position + 1 < self.recorded_length:
            following = self.buffer[self.position + 1]
        else:
            following = current
        self.position += 1
        self.hardware.pwm_set_level(self._playback_filter.process(current, following))
        if self.position % DISPLAY_REFRESH_SAMPLES == 0:
            self.update_display(SystemState.PLAYBACK)