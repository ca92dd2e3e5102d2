# picosynth

picosynth is the logic of a small audio recorder and player. It uses a
microphone read through a 12-bit ADC, a buzzer driven by PWM, two push
buttons, an RGB LED and a 128x64 SSD1306 OLED panel on I2C. The package does
not talk to any hardware itself. You pass in objects that do, so the same code
can run on a board, in a simulator or in tests.

## Installation

```
pip install picosynth
```

The package has no runtime dependencies.

## Modules

### `picosynth.font`

This module holds a 5x7 bitmap font for the characters from space to `~`. The
`~` glyph is drawn as a right arrow.

`glyph(char)` returns the five column bytes for one character. Bit 0 of each
byte is the top row. It raises `TypeError` if the argument is not a single
character, and `ValueError` if the character has no glyph.

### `picosynth.framebuffer`

`Framebuffer` is a page-organised monochrome image of the panel. It holds
1024 bytes in `buffer`, one bit per pixel and eight rows per byte. Calling
`bytes(fb)` returns a copy of that buffer.

| Method | What it does |
| --- | --- |
| `clear()` | Turns every pixel off. |
| `get_pixel(x, y)` | Returns whether a pixel is lit. Coordinates off the panel read as off. |
| `draw_pixel(x, y, color)` | Sets or clears one pixel. Coordinates off the panel are ignored. |
| `draw_line(x0, y0, x1, y1, color)` | Draws a line with Bresenham's algorithm. |
| `draw_string(x, y, text)` | Draws text in the built-in font. Characters advance 6 pixels. When a line fills, the next line starts back at `x`, 8 pixels lower. |
| `draw_vertical_bar(x, height, color)` | Draws a bar rising from the bottom edge. The height is clipped to the panel. |

`RenderArea(start_column, end_column, start_page, end_page)` is a frozen
dataclass that describes a window of display memory. Its `buffer_length()`
method returns the number of bytes the window covers. `FULL_SCREEN` is the
whole 128x8-page panel.

### `picosynth.display`

`SSD1306(bus, address=0x3C)` drives the controller. The `bus` argument can be
any object with a `write(address, data)` method that performs one blocking
I2C write. The class has these methods:

- `send_cmd(cmd)` sends one command byte, prefixed with `0x80`.
- `send_cmd_list(cmds)` sends each command as its own transfer.
- `send_data(data)` sends a block of display memory, prefixed with `0x40`.
- `init()` sends the power-up configuration sequence, `INIT_SEQUENCE`.
- `render(framebuffer, area=FULL_SCREEN)` sets the column and page window,
  then sends the first `area.buffer_length()` bytes of the framebuffer.

### `picosynth.dsp`

- `RecordFilter.process(sample)` conditions one raw 12-bit ADC reading and
  keeps its state between calls. It applies these steps in order:
  - a 1.5x pre-amplifier with 100 counts of headroom;
  - a six-tap weighted smoother;
  - an adaptive noise gate. Samples below the gate become mid-scale (2048).
    Quiet samples above it are doubled.
- `PlaybackFilter.process(current, following)` takes the current stored
  sample and the next one. It applies these steps in order:
  - four-step interpolation between the two samples;
  - an eight-tap weighted smoother;
  - gain: 2x, or 1.5x when the signal is loud.

  It returns a PWM level from 0 to 4094.

### `picosynth.synthesizer`

- `SystemState` has three values: `IDLE`, `RECORDING` and `PLAYBACK`.
- `Hardware` is the protocol your board object implements. It has these
  methods: `gpio_put`, `gpio_get`, `adc_start`, `adc_stop`, `adc_drain`,
  `adc_read` (returns a sample, or `None` when nothing is ready),
  `pwm_set_level`, `pwm_set_enabled` and `sleep_ms`.
- `ButtonDebouncer.pressed(level, now_ms)` reports a press on a falling edge.
  The pin is low when the button is pressed. It reports at most one press per
  200 ms.
- `Synthesizer(hardware, display, clock=None)` ties everything together.
  - `display` is an `SSD1306`.
  - `clock` returns the current time in microseconds. By default it uses a
    monotonic clock.
  - When it is created, the synthesizer turns the LED off, starts the ADC,
    sets the buzzer level to 0, initialises the panel and shows the idle
    screen.

## Usage

Call `step()` repeatedly. Each call polls the buttons, then services the
current state. It takes a sample, plays a sample, or sleeps 10 ms when idle.

```python
from picosynth.display import SSD1306
from picosynth.synthesizer import Synthesizer

synth = Synthesizer(board, SSD1306(i2c_bus))
while True:
    synth.step()
```

Here `board` implements `Hardware` and `i2c_bus` has a `write(address, data)`
method.

The buttons work as follows:

- **Button A**, on GPIO 5, starts a recording when the synthesizer is idle.
  Pressing it again stops the recording. A recording also stops on its own
  after five seconds, which is 55125 samples at 11025 Hz.
- **Button B**, on GPIO 6, plays the last recording when the synthesizer is
  idle. Pressing it again stops playback.

The LED is red while recording, green while playing and off when idle.

The screen shows:

- the remaining recording time while recording;
- the waveform of the recording while playing;
- the button hints when idle.

The screen is redrawn every 100 samples. Its texts are in Portuguese.

You can also call `start_recording()`, `stop_recording()`, `start_playback()`
and `stop_playback()` directly. Each call is ignored when the synthesizer is
not in the right state. Recorded samples are kept in `synth.buffer`, and
`synth.recorded_length` gives how many belong to the last recording. Calling
`draw_waveform(samples)` plots samples into `synth.framebuffer`. It raises
`ValueError` if `samples` is empty.

Status messages are sent to the `picosynth.synthesizer` logger.

## What it does not do

- The package ships no drivers for GPIO, ADC, PWM or I2C. You provide them
  through `Hardware` and the bus object.
- It has no command-line program.
- Recordings are kept only in memory. Nothing is saved to files.

## Running the tests

```
pip install "picosynth[test]"
pytest
```