import pytest

from patternlab.facade import (
    AudioMixer,
    BitrateReader,
    CodecFactory,
    File,
    MPEG4CompressionCodec,
    OggCompressionCodec,
    VideoConverter,
    VideoEditorApplication,
    VideoFile,
    VideoFileName,
    VideoFormat,
)


def test_video_file_keeps_name():
    name = VideoFileName("clip", VideoFormat.AVI)
    video = VideoFile(name)
    assert video.name == name
    assert video.buffer is None


def test_extract_detects_mpeg4():
    codec = CodecFactory.extract(VideoFile(VideoFileName("clip", VideoFormat.MKV)))
    assert type(codec).__name__ == "MPEG4CompressionCodec"


def test_reader_convert_keeps_source_name():
    name = VideoFileName("clip", VideoFormat.MOV)
    source = BitrateReader.read(name, MPEG4CompressionCodec())
    codec = OggCompressionCodec()
    converted = BitrateReader.convert(source, codec)
    assert converted.filename == name
    assert converted.codec is codec
    assert converted is not source


def test_mixer_returns_same_buffer():
    buffer = BitrateReader(VideoFileName("a", VideoFormat.MP4), MPEG4CompressionCodec())
    assert AudioMixer().fix(buffer) is buffer


@pytest.mark.parametrize(
    "destination, codec_name",
    [
        (VideoFormat.MP4, "MPEG4CompressionCodec"),
        (VideoFormat.ASF, "OggCompressionCodec"),
        (VideoFormat.FLV, "OggCompressionCodec"),
    ],
)
def test_converter_picks_destination_codec(destination, codec_name):
    name = VideoFileName("clip", VideoFormat.AVI)
    result = VideoConverter().convert(name, destination)
    assert result.buffer.filename == name
    assert type(result.buffer.codec).__name__ == codec_name


def test_save_marks_file():
    file = File()
    file.save()
    assert file.saved is True


def test_application_run_converts_and_saves():
    file = VideoEditorApplication().run()
    assert file.saved is True
    assert file.buffer.filename == VideoFileName("video", VideoFormat.FLV)