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

# errors raised by the font core. FormatError is something the user typed,
# RangeError is a caller passing a codepoint or pixel outside the font
#

GLYPHS=128
SIZE=8

class FormatError(ValueError):
  pass

class RangeError(IndexError):
  pass

def check_codepoint(codepoint):
  if not isinstance(codepoint,int) or isinstance(codepoint,bool):
    raise RangeError("codepoint must be an integer, got %r"%(codepoint,))
  if codepoint<0 or codepoint>=GLYPHS:
    raise RangeError("codepoint %d outside 0..%d"%(codepoint,GLYPHS-1))
  return codepoint

def check_pixel(row,col):
  for name,v in (("row",row),("col",col)):
    if not isinstance(v,int) or isinstance(v,bool) or v<0 or v>=SIZE:
      raise RangeError("%s %r outside 0..%d"%(name,v,SIZE-1))
