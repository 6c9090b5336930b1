#
# The MIT License (MIT)
#
# Copyright (c) 2022 Madis Kaal <mast@nomad.ee>
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#

from collections import namedtuple
from types import MappingProxyType
from fonterrors import check_codepoint

SPECIAL="special"
NOT_RENDERED="not-rendered"
PRINTABLE="printable"

# shown in place of control characters that have no useful glyph
PLACEHOLDER="XX"

Category=namedtuple("Category",("kind","escape"))

SPECIAL_VALUES=MappingProxyType({
  0:"\\0",
  9:"\\t",
  10:"\\n",
  13:"\\r",
})

NOT_RENDERED_VALUES=frozenset(set(range(32))|{127})-frozenset(SPECIAL_VALUES)

def classify(codepoint):
  check_codepoint(codepoint)
  escape=SPECIAL_VALUES.get(codepoint)
  if escape is not None:
    return Category(SPECIAL,escape)
  if codepoint in NOT_RENDERED_VALUES:
    return Category(NOT_RENDERED,None)
  return Category(PRINTABLE,None)

def label_for(codepoint):
  category=classify(codepoint)
  if category.kind==SPECIAL:
    return category.escape
  if category.kind==NOT_RENDERED:
    return PLACEHOLDER
  return chr(codepoint).rjust(2)

# left hand side of a generated case line. quote and prefix select the
# literal syntax of the host language, ie. prefix "b" gives rust byte literals
#
def export_token(codepoint,quote="'",prefix=""):
  category=classify(codepoint)
  if category.kind==SPECIAL:
    return "%s%s%s%s"%(prefix,quote,category.escape,quote)
  if category.kind==NOT_RENDERED:
    return "%d"%codepoint
  c=chr(codepoint)
  if c==quote or c=="\\":
    c="\\"+c
  return "%s%s%s%s"%(prefix,quote,c,quote)

def info_line(codepoint):
  return "%-3d | %s"%(codepoint,label_for(codepoint))
