import pytest
from charclass import classify, label_for, export_token, info_line, \
  SPECIAL, NOT_RENDERED, PRINTABLE, SPECIAL_VALUES, NOT_RENDERED_VALUES, PLACEHOLDER
from fonterrors import RangeError

def test_categories_partition_codepoints():
  kinds={SPECIAL:set(),NOT_RENDERED:set(),PRINTABLE:set()}
  for c in range(128):
    kinds[classify(c).kind].add(c)
  assert kinds[SPECIAL]=={0,9,10,13}
  assert kinds[NOT_RENDERED]==(set(range(1,32))-{9,10,13})|{127}
  assert kinds[PRINTABLE]==set(range(32,127))
  assert sum(len(v) for v in kinds.values())==128

def test_special_escapes():
  assert classify(0).escape=="\\0"
  assert classify(9).escape=="\\t"
  assert classify(10).escape=="\\n"
  assert classify(13).escape=="\\r"
  assert classify(65).escape is None

def test_tables_are_read_only():
  with pytest.raises(TypeError):
    SPECIAL_VALUES[1]="\\a"
  assert isinstance(NOT_RENDERED_VALUES,frozenset)

@pytest.mark.parametrize("codepoint",[-1,128,1000])
def test_out_of_range(codepoint):
  with pytest.raises(RangeError):
    classify(codepoint)

def test_non_integer_codepoint():
  with pytest.raises(RangeError):
    classify("A")

def test_labels():
  assert label_for(10)=="\\n"
  assert label_for(1)==PLACEHOLDER
  assert label_for(127)=="XX"
  assert label_for(65)==" A"
  assert label_for(32)=="  "

def test_export_tokens():
  assert export_token(10)=="'\\n'"
  assert export_token(0)=="'\\0'"
  assert export_token(65)=="'A'"
  assert export_token(1)=="1"
  assert export_token(127)=="127"

def test_export_token_escapes_quote_and_backslash():
  assert export_token(39)=="'\\''"
  assert export_token(92)=="'\\\\'"
  assert export_token(34)=="'\"'"
  assert export_token(34,quote='"')=='"\\""'

def test_export_token_prefix():
  assert export_token(65,prefix="b")=="b'A'"
  assert export_token(13,prefix="b")=="b'\\r'"
  assert export_token(2,prefix="b")=="2"

def test_info_line():
  assert info_line(65)=="65  |  A"
  assert info_line(5)=="5   | XX"
  assert info_line(127)=="127 | XX"
