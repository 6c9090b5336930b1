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

# glyph bitmap is 64 booleans, index row*8+col. packed form is one byte per
# row with the leftmost column in bit 7, and the hex form is those 8 bytes
# as 16 lowercase hex digits
#

import string
from fonterrors import FormatError, SIZE

HEXDIGITS=frozenset(string.hexdigits)

def pack(bits):
  if len(bits)!=SIZE*SIZE:
    raise ValueError("bitmap must have %d entries, got %d"%(SIZE*SIZE,len(bits)))
  data=bytearray(SIZE)
  for y in range(SIZE):
    b=0
    for x in range(SIZE):
      if bits[y*SIZE+x]:
        b|=1<<(7-x)
    data[y]=b
  return bytes(data)

def unpack(data,bits):
  if len(data)!=SIZE:
    raise ValueError("packed glyph must be %d bytes, got %d"%(SIZE,len(data)))
  if len(bits)!=SIZE*SIZE:
    raise ValueError("bitmap must have %d entries, got %d"%(SIZE*SIZE,len(bits)))
  for y in range(SIZE):
    for x in range(SIZE):
      bits[y*SIZE+x]=((data[y]>>(7-x))&1)!=0
  return bits

def bytes_to_hex(data):
  if len(data)!=SIZE:
    raise ValueError("packed glyph must be %d bytes, got %d"%(SIZE,len(data)))
  return "".join("%02x"%b for b in data)

# accepts what a user has typed so far: blank means an empty glyph and a
# shorter even length prefix is padded with zero rows
#
def hex_to_bytes(text):
  text=text.strip()
  if not text:
    return bytes(SIZE)
  if len(text)%2:
    raise FormatError("odd number of hex digits in %r"%text)
  if len(text)>SIZE*2:
    raise FormatError("more than %d hex digits in %r"%(SIZE*2,text))
  data=bytearray(SIZE)
  for i in range(0,len(text),2):
    chunk=text[i:i+2]
    if not set(chunk)<=HEXDIGITS:
      raise FormatError("%r is not a hex byte"%chunk)
    data[i>>1]=int(chunk,16)
  return bytes(data)

def bits_to_hex(bits):
  return bytes_to_hex(pack(bits))

def hex_to_bits(text):
  return unpack(hex_to_bytes(text),[False]*(SIZE*SIZE))
