import re
import pytest
from fonttable import FontTable, ExportFormat, EXPORT_FORMATS
from fonterrors import FormatError, RangeError

def test_table_has_all_codepoints():
  t=FontTable()
  assert len(t)==128
  for c in range(128):
    assert t.get(c).codepoint==c
    assert t.get(c).is_empty()

@pytest.mark.parametrize("codepoint",[-1,128])
def test_get_out_of_range(codepoint):
  t=FontTable()
  with pytest.raises(RangeError):
    t.get(codepoint)

def test_toggle_is_local():
  t=FontTable()
  t.toggle_pixel(65,0,0)
  assert t.hex_of(65)=="8000000000000000"
  assert t.defined()==[65]

def test_toggle_out_of_range():
  t=FontTable()
  with pytest.raises(RangeError):
    t.toggle_pixel(65,8,0)
  assert t.get(65).is_empty()

def test_load_hex():
  t=FontTable()
  t.load_hex(65,"183C66667E666600")
  assert t.hex_of(65)=="183c66667e666600"
  t.load_hex(65,"")
  assert t.get(65).is_empty()

@pytest.mark.parametrize("text",["1","zz00000000000000","00"*9])
def test_bad_hex_keeps_glyph(text):
  t=FontTable()
  t.load_hex(66,"7c66667c66667c00")
  before=t.get(66).bits()
  with pytest.raises(FormatError):
    t.load_hex(66,text)
  assert t.get(66).bits()==before

def test_copy():
  t=FontTable()
  t.load_hex(65,"183c66667e666600")
  t.copy(65,97)
  assert t.hex_of(97)=="183c66667e666600"
  t.toggle_pixel(97,0,0)
  assert t.hex_of(65)=="183c66667e666600"

def test_export_all_shape():
  t=FontTable()
  t.load_hex(65,"183c66667e666600")
  lines=t.export_all().split("\n")
  assert len(lines)==128
  hexes=[]
  for l in lines:
    m=re.fullmatch(r"case +(.+): return 0x([0-9a-f]+);",l)
    assert m
    hexes.append(m.group(2))
  assert all(len(h)==16 for h in hexes)
  assert lines[0]=="case '\\0': return 0x0000000000000000;"
  assert lines[1]=="case    1: return 0x0000000000000000;"
  assert lines[10]=="case '\\n': return 0x0000000000000000;"
  assert lines[65]=="case  'A': return 0x183c66667e666600;"
  assert lines[127]=="case  127: return 0x0000000000000000;"

def test_export_is_deterministic():
  t=FontTable()
  t.toggle_pixel(33,2,3)
  assert t.export_all()==t.export_all()

def test_rust_export():
  t=FontTable()
  lines=t.export_all(EXPORT_FORMATS["rust"]).split("\n")
  assert lines[65]==" b'A' => 0x0000000000000000,"
  assert lines[1]=="    1 => 0x0000000000000000,"
  source=t.export_source(EXPORT_FORMATS["rust"]).split("\n")
  assert source[0]=="match c {"
  assert source[-3]=="  _ => 0,"
  assert source[-2]=="}"

def test_custom_format():
  fmt=ExportFormat("%(token)s:%(hex)s",quote='"')
  t=FontTable()
  assert t.export_all(fmt).split("\n")[66]=='"B":0000000000000000'

def test_export_source_wraps_lines():
  t=FontTable()
  source=t.export_source()
  lines=source.rstrip("\n").split("\n")
  assert lines[0]=="switch (c) {"
  assert lines[1]=="  case '\\0': return 0x0000000000000000;"
  assert lines[-2]=="  default: return 0;"
  assert lines[-1]=="}"
  assert len(lines)==131

def test_hexes_round_trip():
  t=FontTable()
  t.load_hex(1,"ff00ff00ff00ff00")
  t.invert(2)
  u=FontTable()
  assert u.load_hexes(t.hexes())==[]
  assert u.hexes()==t.hexes()

def test_load_hexes_reports_rejects():
  t=FontTable()
  t.load_hex(1,"ff00000000000000")
  rejected=t.load_hexes(["", "xyz1", "01"])
  assert rejected==[1]
  assert t.hex_of(1)=="ff00000000000000"
  assert t.hex_of(2)=="0100000000000000"

def test_info_line():
  t=FontTable()
  t.toggle_pixel(65,7,7)
  assert t.info_line(65)=="65  |  A | 0x0000000000000001"
