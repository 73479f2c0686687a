"""
Audio output sink built on sounddevice.

A sink plays exactly one appended stream. Changing tracks means stopping
the sink and creating a new one; there is no in-place stream replacement
and no seeking.
"""

from typing import Any, Optional, Protocol

import numpy as np
import sounddevice as sd
from loguru import logger

from tapedeck.core.errors import DeviceError
from tapedeck.domain.library.models import SampleStream


class Sink(Protocol):
    """Commands the transport issues to an audio sink."""

    def append(self, stream: SampleStream) -> None: ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def stop(self) -> None: ...

    def set_volume(self, volume: float) -> None: ...


def open_output_device() -> Any:
    """
    Resolve the default output device.

    Returns:
        sounddevice device index (or None for the host default)

    Raises:
        DeviceError: If no output device is available
    """
    try:
        info = sd.query_devices(kind="output")
    except (sd.PortAudioError, ValueError) as e:
        raise DeviceError("no audio device") from e

    logger.info(f"Using output device: {info.get('name', 'default')}")
    return info.get("index")


class AudioSink:
    """Callback-driven output stream for one SampleStream.

    New sinks start paused. The PortAudio callback only reads plain
    attributes and never logs or allocates beyond the output block.
    """

    def __init__(self, device: Any = None, blocksize: int = 2048):
        self.device = device
        self.blocksize = blocksize
        self._stream: Optional[sd.OutputStream] = None
        self._source: Optional[SampleStream] = None
        self._playing = False
        self._volume = 1.0
        self._stopped = False

    def _callback(self, outdata: np.ndarray, frames: int, time_info, status) -> None:
        source = self._source
        if not self._playing or source is None:
            outdata.fill(0)
            return

        block = source.read(frames)
        n = block.shape[0]
        outdata[:n] = block * self._volume
        if n < frames:
            outdata[n:] = 0.0

    def _check_open(self) -> None:
        if self._stopped:
            raise DeviceError("sink already stopped")

    def append(self, stream: SampleStream) -> None:
        """Attach the stream and open the output device for it."""
        self._check_open()
        if self._source is not None:
            raise DeviceError("sink already has a stream; recreate it to change tracks")

        self._source = stream
        try:
            self._stream = sd.OutputStream(
                device=self.device,
                samplerate=stream.sample_rate,
                channels=stream.channels,
                dtype="float32",
                blocksize=self.blocksize,
                callback=self._callback,
            )
            self._stream.start()
        except sd.PortAudioError as e:
            raise DeviceError(f"could not open output stream: {e}") from e

        logger.debug(
            f"Output stream opened: {stream.sample_rate}Hz, {stream.channels}ch, "
            f"{stream.total_duration or 0:.1f}s"
        )

    def play(self) -> None:
        self._check_open()
        self._playing = True

    def pause(self) -> None:
        self._check_open()
        self._playing = False

    def set_volume(self, volume: float) -> None:
        self._check_open()
        self._volume = max(0.0, min(1.0, float(volume)))

    def stop(self) -> None:
        """Close the output stream. Idempotent."""
        if self._stopped:
            return
        self._stopped = True
        self._playing = False
        if self._stream is not None:
            try:
                self._stream.stop()
                self._stream.close()
            except sd.PortAudioError as e:
                raise DeviceError(f"could not close output stream: {e}") from e
            finally:
                self._stream = None
        logger.debug("Output stream closed")
