"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from ubxgen import Definitions, loads_definitions

SAMPLE_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<Definitions>
  <Message>
    <Name>NAV-POSLLH</Name>
    <Type>Periodic/Polled</Type>
    <Description>Geodetic Position Solution</Description>
    <Comment>See important comments
\tconcerning validity of position</Comment>
    <Firmware>Supported on u-blox 8</Firmware>
    <Structure>
      <Class>0x01</Class>
      <Id>0x02</Id>
      <Length>28</Length>
      <Payload>
        <Block><Offset>0</Offset><Name>iTOW</Name><Type>U4</Type><Unit>ms</Unit></Block>
        <Block><Offset>4</Offset><Name>lon</Name><Type>I4</Type><Scale>1e-7</Scale><Unit>deg</Unit></Block>
        <Block><Offset>8</Offset><Name>lat</Name><Type>I4</Type><Scale>1e-7</Scale><Unit>deg</Unit></Block>
      </Payload>
    </Structure>
  </Message>
  <Message>
    <Name>NAV-SAT</Name>
    <Description>Satellite Information</Description>
    <Structure>
      <Class>1</Class>
      <Id>53</Id>
      <Length>8 + 12*numSvs</Length>
      <Payload>
        <Block><Offset>0</Offset><Name>iTOW</Name><Type>U4</Type></Block>
        <Block><Offset>4</Offset><Name>version</Name><Type>U1</Type></Block>
        <Block><Offset>5</Offset><Name>numSvs</Name><Type>U1</Type></Block>
        <Block><Offset>6</Offset><Name>reserved1</Name><Type>U1[2]</Type></Block>
        <Block type="repeated" name="numSvs">
          <Block><Offset>8 + 12*N</Offset><Name>gnssId</Name><Type>U1</Type></Block>
          <Block>
            <Offset>16 + 12*N</Offset>
            <Name>flags</Name>
            <Type>X4</Type>
            <Bitfield>
              <Type><Index>2:0</Index><Type>U</Type><Name>qualityInd</Name><Description>Signal quality indicator</Description></Type>
              <Type><Index>3</Index><Type>U</Type><Name>svUsed</Name></Type>
              <Type><Index>5:4</Index><Type>U</Type><Name>health</Name></Type>
            </Bitfield>
          </Block>
          <Block type="optional">
            <Block><Name>elev</Name><Type>I1</Type><Unit>deg</Unit></Block>
          </Block>
        </Block>
      </Payload>
    </Structure>
  </Message>
  <Message>
    <Name>MON-VER</Name>
    <Structure>
      <Class>0x0A</Class>
      <Id>0x04</Id>
      <Length>40 + 30*N</Length>
      <Payload>
        <Block><Offset>0</Offset><Name>swVersion</Name><Type>CH[30]</Type></Block>
        <Block><Offset>30</Offset><Name>hwVersion</Name><Type>CH[10]</Type></Block>
      </Payload>
    </Structure>
  </Message>
</Definitions>
"""


@pytest.fixture
def sample_xml() -> str:
    """Schema document with plain, repeated, optional and bitfield blocks."""
    return SAMPLE_XML


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Sample schema document written to disk."""
    path = tmp_path / "messages.xml"
    path.write_text(SAMPLE_XML, encoding="utf-8")
    return path


@pytest.fixture
def definitions() -> Definitions:
    """Linked Definitions graph of the sample document."""
    return loads_definitions(SAMPLE_XML).link()

