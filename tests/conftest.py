import pytest

from rppreader import parse


SAMPLE_RPP = """<REAPER_PROJECT 0.1 "6.80/linux-x86_64" 1681234567
  RIPPLE 0
  <NOTES 0 2
  >
  MARKER 1 "12.5" 0 "" 0
  MARKER 2 30 "Break" 0 0
  <TRACK {A1B2C3D4-0000-0000-0000-000000000001}
    NAME "Music Track"
    VOLPAN 1 0 -1 -1 1
    <ITEM
      POSITION 0
      LENGTH 120.5
      NAME "SEG 01 Intro"
      <SOURCE WAVE
        FILE "music/intro.wav"
      >
    >
  >
  <TRACK {A1B2C3D4-0000-0000-0000-000000000002}
    NAME "Kewlio"
    <ITEM
      POSITION 10.25
      LENGTH 5
      NAME "Voice 1"
      <SOURCE WAVE
        FILE "voice/take1.wav"
      >
    >
    <ITEM
      POSITION 20
      LENGTH 2.5
      NAME "Voice 2"
      <SOURCE MIDI
        HASDATA 1 960 QN
      >
    >
  >
  <RENDER_CFG
    ZXZhdxgAAQ==
  >
>
"""


@pytest.fixture
def sample_text():
    return SAMPLE_RPP


@pytest.fixture
def document():
    return parse(SAMPLE_RPP)


@pytest.fixture
def rpp_file(tmp_path):
    path = tmp_path / "20240105 Episode.rpp"
    path.write_text(SAMPLE_RPP, encoding="utf-8")
    return path
