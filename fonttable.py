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

import logging
import glyphcodec
from charclass import export_token, info_line
from fonterrors import FormatError, GLYPHS, check_codepoint
from glyph import GlyphState, GlyphView

log=logging.getLogger(__name__)

# how one generated case line looks in the host language. line is a
# %-format with token and hex keys, header/default/footer wrap the lines
# into a complete dispatch block
#
class ExportFormat:

  def __init__(self,line,quote="'",prefix="",header="",default="",footer=""):
    self.line=line
    self.quote=quote
    self.prefix=prefix
    self.header=header
    self.default=default
    self.footer=footer

  def token(self,codepoint):
    return export_token(codepoint,quote=self.quote,prefix=self.prefix)

  def format(self,codepoint,hexvalue):
    return self.line%{"token":self.token(codepoint),"hex":hexvalue}

EXPORT_FORMATS={
  "c":ExportFormat("case %(token)4s: return 0x%(hex)s;",
    header="switch (c) {",default="default: return 0;",footer="}"),
  "rust":ExportFormat("%(token)5s => 0x%(hex)s,",prefix="b",
    header="match c {",default="_ => 0,",footer="}"),
}
DEFAULT_FORMAT="c"

class FontTable:

  def __init__(self):
    self._glyphs=[GlyphState(c) for c in range(GLYPHS)]

  def __len__(self):
    return len(self._glyphs)

  def _state(self,codepoint):
    return self._glyphs[check_codepoint(codepoint)]

  def get(self,codepoint):
    return GlyphView(self._state(codepoint))

  def toggle_pixel(self,codepoint,row,col):
    self._state(codepoint).toggle(row,col)

  def hex_of(self,codepoint):
    return self._state(codepoint).hex()

  def load_hex(self,codepoint,text):
    state=self._state(codepoint)
    data=glyphcodec.hex_to_bytes(text)
    state.load(data)
    log.debug("glyph %d loaded from hex %s",codepoint,state.hex())

  def clear(self,codepoint):
    self._state(codepoint).clear()

  def invert(self,codepoint):
    self._state(codepoint).invert()

  def roll(self,codepoint,dx,dy):
    self._state(codepoint).roll(dx,dy)

  def copy(self,src,dst):
    self._state(dst).load(self._state(src).packed())

  def hexes(self):
    return [g.hex() for g in self._glyphs]

  # bulk load, each glyph either loads completely or keeps its state.
  # returns codepoints whose hex was rejected
  #
  def load_hexes(self,hexes):
    if len(hexes)>GLYPHS:
      log.warning("%d glyphs given, only first %d used",len(hexes),GLYPHS)
    rejected=[]
    for c,h in enumerate(hexes[:GLYPHS]):
      try:
        self.load_hex(c,h)
      except FormatError as e:
        log.warning("glyph %d not loaded: %s",c,e)
        rejected.append(c)
    return rejected

  def defined(self):
    return [g.codepoint for g in self._glyphs if not g.is_empty()]

  def info_line(self,codepoint):
    return "%s | 0x%s"%(info_line(codepoint),self.hex_of(codepoint))

  def export_all(self,fmt=None):
    if fmt is None:
      fmt=EXPORT_FORMATS[DEFAULT_FORMAT]
    return "\n".join(fmt.format(g.codepoint,g.hex()) for g in self._glyphs)

  def export_source(self,fmt=None):
    if fmt is None:
      fmt=EXPORT_FORMATS[DEFAULT_FORMAT]
    lines=[]
    if fmt.header:
      lines.append(fmt.header)
    for l in self.export_all(fmt).split("\n"):
      lines.append("  "+l)
    if fmt.default:
      lines.append("  "+fmt.default)
    if fmt.footer:
      lines.append(fmt.footer)
    return "\n".join(lines)+"\n"
