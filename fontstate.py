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

# editor session is kept in a small key=value file between runs, the same
# way the settings are read back: unknown keys are ignored, anything after
# # is a comment
#

import json
import logging
import os
import glyphcodec
from fonterrors import FormatError, GLYPHS, SIZE
from fonttable import EXPORT_FORMATS, DEFAULT_FORMAT

log=logging.getLogger(__name__)

STATEFILE=".fontmaker.state"

DEFAULTS={
  "char":ord("A"),
  "cx":0,
  "cy":0,
  "stride":50,
  "style":DEFAULT_FORMAT,
  "clip":None,
}

def _int_in(lo,hi):
  def conv(v):
    v=int(v)
    if v<lo or v>hi:
      raise ValueError("%d outside %d..%d"%(v,lo,hi))
    return v
  return conv

def _style(v):
  if v not in EXPORT_FORMATS:
    raise ValueError("unknown export style %r"%v)
  return v

def _clip(v):
  v=json.loads(v)
  if v is not None and not isinstance(v,str):
    raise ValueError("clip must be a hex string")
  return v

CONVERTERS={
  "char":_int_in(0,GLYPHS-1),
  "cx":_int_in(0,SIZE-1),
  "cy":_int_in(0,SIZE-1),
  "stride":_int_in(4,200),
  "style":_style,
  "clip":_clip,
}

def load_state(filename,table):
  settings=dict(DEFAULTS)
  if not os.path.exists(filename):
    log.debug("no state file %s",filename)
    return settings
  with open(filename,"rt") as f:
    lines=f.readlines()
  for lineno,l in enumerate(lines,1):
    p=l.partition("=")
    if p[1]!="=":
      continue
    k=p[0].strip().lower()
    v=p[2].partition("#")[0].strip()
    try:
      if k=="font":
        hexes=json.loads(v)
        if not isinstance(hexes,list) or not all(isinstance(h,str) for h in hexes):
          raise ValueError("font must be a list of hex strings")
        table.load_hexes(hexes)
      elif k in CONVERTERS:
        settings[k]=CONVERTERS[k](v)
      else:
        log.debug("%s:%d: unknown key %s",filename,lineno,k)
    except ValueError as e:
      log.warning("%s:%d: bad value for %s: %s",filename,lineno,k,e)
  clip=settings["clip"]
  if clip is not None:
    try:
      settings["clip"]=glyphcodec.bytes_to_hex(glyphcodec.hex_to_bytes(clip))
    except FormatError as e:
      log.warning("%s: dropping clip: %s",filename,e)
      settings["clip"]=None
  return settings

def save_state(filename,table,settings):
  with open(filename,"wt") as f:
    f.write("char=%d\n"%settings["char"])
    f.write("cx=%d\n"%settings["cx"])
    f.write("cy=%d\n"%settings["cy"])
    f.write("stride=%d\n"%settings["stride"])
    f.write("style=%s\n"%settings["style"])
    f.write("clip=%s\n"%json.dumps(settings.get("clip")))
    f.write("font=%s\n"%json.dumps(table.hexes()))
  log.debug("state saved to %s",filename)
