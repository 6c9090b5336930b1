import random
import pytest
from glyphcodec import pack, unpack, bytes_to_hex, hex_to_bytes, bits_to_hex, hex_to_bits
from fonterrors import FormatError

def bitmap(*pixels):
  bits=[False]*64
  for row,col in pixels:
    bits[row*8+col]=True
  return bits

def test_top_left_pixel():
  data=pack(bitmap((0,0)))
  assert data==bytes([0x80,0,0,0,0,0,0,0])
  assert bytes_to_hex(data)=="8000000000000000"

def test_bottom_right_pixel():
  data=pack(bitmap((7,7)))
  assert data==bytes([0,0,0,0,0,0,0,0x01])
  assert bytes_to_hex(data)=="0000000000000001"

def test_hex_is_lowercase_and_16_digits():
  h=bytes_to_hex(bytes([0xAB,0xCD,0xEF,1,2,3,4,5]))
  assert h=="abcdef0102030405"

@pytest.mark.parametrize("text",["","   ","\t\n"])
def test_blank_is_empty_glyph(text):
  assert hex_to_bytes(text)==bytes(8)

@pytest.mark.parametrize("text",["1","123","800000000000000"])
def test_odd_length(text):
  with pytest.raises(FormatError):
    hex_to_bytes(text)

@pytest.mark.parametrize("text",["zz00000000000000","0g","+f00","0x00","f_","0 "])
def test_not_hex(text):
  with pytest.raises(FormatError):
    hex_to_bytes(text)

def test_too_long():
  with pytest.raises(FormatError):
    hex_to_bytes("00"*9)

def test_format_error_is_value_error():
  with pytest.raises(ValueError):
    hex_to_bytes("1")

def test_case_insensitive_and_trimmed():
  assert hex_to_bytes("  FF00AA0000000001 ")==bytes([0xff,0,0xaa,0,0,0,0,1])

def test_partial_input_pads_rows():
  assert hex_to_bytes("18")==bytes([0x18,0,0,0,0,0,0,0])

def test_unpack_overwrites_in_place():
  bits=[True]*64
  result=unpack(bytes([0x80,0,0,0,0,0,0,0x01]),bits)
  assert result is bits
  assert bits==bitmap((0,0),(7,7))

def test_wrong_sizes():
  with pytest.raises(ValueError):
    pack([False]*63)
  with pytest.raises(ValueError):
    unpack(bytes(7),[False]*64)
  with pytest.raises(ValueError):
    bytes_to_hex(bytes(9))

def test_round_trip():
  rnd=random.Random(1234)
  samples=[[False]*64,[True]*64,bitmap((0,7),(7,0),(3,4))]
  samples+=[[rnd.random()<0.5 for i in range(64)] for j in range(50)]
  for bits in samples:
    back=unpack(hex_to_bytes(bytes_to_hex(pack(bits))),[False]*64)
    assert back==bits

def test_bits_helpers():
  assert bits_to_hex(bitmap((0,0)))=="8000000000000000"
  assert hex_to_bits("0000000000000001")==bitmap((7,7))
