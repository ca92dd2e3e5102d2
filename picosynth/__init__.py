"""Audio record-and-playback state machine with an SSD1306 OLED framebuffer and display driver."""

__version__ = "0.1.0"
__all__ = ["font", "framebuffer", "display", "dsp", "synthesizer"]