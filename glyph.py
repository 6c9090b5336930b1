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

import glyphcodec
from fonterrors import SIZE, check_codepoint, check_pixel

class GlyphState:

  def __init__(self,codepoint):
    self.codepoint=check_codepoint(codepoint)
    self._bits=[False]*(SIZE*SIZE)

  def pixel(self,row,col):
    check_pixel(row,col)
    return self._bits[row*SIZE+col]

  def toggle(self,row,col):
    check_pixel(row,col)
    self._bits[row*SIZE+col]=not self._bits[row*SIZE+col]

  def bits(self):
    return tuple(self._bits)

  def packed(self):
    return glyphcodec.pack(self._bits)

  def hex(self):
    return glyphcodec.bytes_to_hex(self.packed())

  # data is already decoded, so this cannot fail half way
  def load(self,data):
    bits=glyphcodec.unpack(data,[False]*(SIZE*SIZE))
    self._bits[:]=bits

  def is_empty(self):
    return not any(self._bits)

  def clear(self):
    self._bits[:]=[False]*(SIZE*SIZE)

  def invert(self):
    self._bits[:]=[not b for b in self._bits]

  # shift with wrap-around, positive dx moves right and positive dy down
  def roll(self,dx,dy):
    old=list(self._bits)
    for y in range(SIZE):
      for x in range(SIZE):
        self._bits[((y+dy)%SIZE)*SIZE+(x+dx)%SIZE]=old[y*SIZE+x]


class GlyphView:
  """Read-only window on a GlyphState, handed out to renderers."""

  def __init__(self,state):
    self._state=state

  @property
  def codepoint(self):
    return self._state.codepoint

  def pixel(self,row,col):
    return self._state.pixel(row,col)

  def bits(self):
    return self._state.bits()

  def packed(self):
    return self._state.packed()

  def hex(self):
    return self._state.hex()

  def is_empty(self):
    return self._state.is_empty()

  def __repr__(self):
    return "GlyphView(%d, %s)"%(self.codepoint,self.hex())
