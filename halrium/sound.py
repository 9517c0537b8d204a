"""Loading of RIFF/WAVE sound files and the playback state of each sound."""

from __future__ import annotations

import enum
import io
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Mapping, Union

LOOP_INFINITE = 255

_FMT_LAYOUT = struct.Struct("<HHIIHH")


class SoundLabel(enum.IntEnum):
    """The sounds the game uses."""

    BGM000 = 0
    BGM001 = 1
    SE_SELECT = 2
    SE_COMPLETE = 3


SOUND_FILES = {
    SoundLabel.BGM000: ("data/BGM/hewTitleBGM.wav", True),
    SoundLabel.BGM001: ("data/BGM/hewGameBGM.wav", True),
    SoundLabel.SE_SELECT: ("data/SE/selectSE.wav", False),
    SoundLabel.SE_COMPLETE: ("data/SE/completeSE.wav", False),
}


class WaveFormatError(ValueError):
    """The file is not a usable RIFF/WAVE file."""


@dataclass(frozen=True)
class WaveData:
    """The format description and sample data of a WAVE file."""

    format_tag: int
    channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    format_bytes: bytes
    data: bytes


def find_chunk(stream: BinaryIO, chunk_id: Union[bytes, str]) -> tuple[int, int]:
    """Return the size and data offset of the first chunk called ``chunk_id``."""
    if isinstance(chunk_id, str):
        chunk_id = chunk_id.encode("ascii")
    if len(chunk_id) != 4:
        raise ValueError("a chunk id is four bytes long")
    stream.seek(0)
    offset = 0
    riff_seen = False
    while True:
        header = stream.read(8)
        if len(header) < 8:
            raise WaveFormatError(f"chunk {chunk_id!r} not found")
        kind, size = struct.unpack("<4sI", header)
        if kind == b"RIFF":
            riff_seen = True
            size = 4
            if len(stream.read(4)) < 4:
                raise WaveFormatError("truncated RIFF header")
        else:
            stream.seek(size, io.SEEK_CUR)
        offset += 8
        if kind == chunk_id:
            return size, offset
        offset += size
        if not riff_seen:
            raise WaveFormatError("not a RIFF file")


def _read_at(stream: BinaryIO, offset: int, size: int) -> bytes:
    stream.seek(offset)
    chunk = stream.read(size)
    if len(chunk) < size:
        raise WaveFormatError("chunk data is truncated")
    return chunk


def read_wave(stream: BinaryIO) -> WaveData:
    """Parse a RIFF/WAVE stream into its format and sample data."""
    size, position = find_chunk(stream, b"RIFF")
    if _read_at(stream, position, size) != b"WAVE":
        raise WaveFormatError("RIFF file is not of type WAVE")

    size, position = find_chunk(stream, b"fmt ")
    format_bytes = _read_at(stream, position, size)
    if len(format_bytes) < _FMT_LAYOUT.size:
        raise WaveFormatError("format chunk is too short")
    fields = _FMT_LAYOUT.unpack_from(format_bytes)

    size, position = find_chunk(stream, b"data")
    data = _read_at(stream, position, size)
    return WaveData(*fields, format_bytes=format_bytes, data=data)


def load_sounds(root: Union[str, Path]) -> dict[SoundLabel, WaveData]:
    """Read every sound file of the game from the directory ``root``."""
    base = Path(root)
    sounds = {}
    for label, (relative, _loops) in SOUND_FILES.items():
        with open(base / relative, "rb") as stream:
            sounds[label] = read_wave(stream)
    return sounds


@dataclass
class _Buffer:
    data: bytes
    loop_count: int


@dataclass
class _Voice:
    wave: WaveData
    playing: bool = False
    queued: list = field(default_factory=list)


class SoundBank:
    """Playback state of each loaded sound: its queued buffer and whether it plays."""

    def __init__(self, sounds: Mapping[SoundLabel, WaveData]):
        self.voices = {
            label: _Voice(wave, queued=[_Buffer(wave.data, 0)])
            for label, wave in sounds.items()
        }

    def play(self, label: SoundLabel, loop_count: int = 0) -> None:
        """Start ``label`` from the beginning, looping ``loop_count`` extra times."""
        voice = self.voices[label]
        if voice.queued:
            voice.playing = False
            voice.queued.clear()
        voice.queued.append(_Buffer(voice.wave.data, loop_count))
        voice.playing = True

    def stop(self, label: SoundLabel) -> None:
        """Stop ``label`` and drop its queued buffer."""
        voice = self.voices[label]
        if voice.queued:
            voice.playing = False
            voice.queued.clear()

    def stop_all(self) -> None:
        """Pause every sound, keeping what is queued."""
        for voice in self.voices.values():
            voice.playing = False