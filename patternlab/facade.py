"""A video converter hiding codecs, readers and mixers behind one call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class VideoFormat(Enum):
    UNKNOWN = auto()
    MP4 = auto()
    AVI = auto()
    MKV = auto()
    MOV = auto()
    FLV = auto()
    ASF = auto()


@dataclass(frozen=True)
class VideoFileName:
    name: str
    format: VideoFormat


class File:
    """A file holding an optional converted buffer."""

    def __init__(self, buffer: BitrateReader | None = None) -> None:
        self.buffer = buffer
        self.saved = False

    def save(self) -> None:
        self.saved = True


class VideoFile(File):
    def __init__(self, name: VideoFileName) -> None:
        super().__init__()
        self.name = name


class Codec:
    pass


class OggCompressionCodec(Codec):
    pass


class MPEG4CompressionCodec(Codec):
    pass


class CodecFactory:
    @staticmethod
    def extract(file: File) -> Codec:
        """Detect the codec of *file*."""
        return MPEG4CompressionCodec()


class BitrateReader:
    """Decoded video data tagged with its source name and codec."""

    def __init__(self, filename: VideoFileName, codec: Codec) -> None:
        self.filename = filename
        self.codec = codec
        self.audio_fixed = False

    @staticmethod
    def read(filename: VideoFileName, source_codec: Codec) -> BitrateReader:
        return BitrateReader(filename, source_codec)

    @staticmethod
    def convert(buffer: BitrateReader, codec: Codec) -> BitrateReader:
        return BitrateReader(buffer.filename, codec)


class AudioMixer:
    def fix(self, buffer: BitrateReader) -> BitrateReader:
        """Mark the audio of *buffer* as fixed and return the same buffer."""
        buffer.audio_fixed = True
        return buffer


class VideoConverter:
    """Facade over the conversion subsystem."""

    def convert(
        self, filename: VideoFileName, destination_format: VideoFormat
    ) -> File:
        file = VideoFile(filename)
        source_codec = CodecFactory.extract(file)
        destination_codec: Codec
        if destination_format is VideoFormat.MP4:
            destination_codec = MPEG4CompressionCodec()
        else:
            destination_codec = OggCompressionCodec()
        buffer = BitrateReader.read(filename, source_codec)
        result = BitrateReader.convert(buffer, destination_codec)
        result = AudioMixer().fix(result)
        return File(result)


class VideoEditorApplication:
    def __init__(self) -> None:
        self._converter = VideoConverter()

    def run(self) -> File:
        name = VideoFileName("video", VideoFormat.FLV)
        file = self._converter.convert(name, VideoFormat.MP4)
        file.save()
        return file


def run() -> None:
    VideoEditorApplication().run()