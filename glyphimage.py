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

import PIL.Image,PIL.ImageDraw
from fonterrors import SIZE

BACKGROUND=(0,0,0)
FOREGROUND=(255,255,255)
GRIDLINE=(128,128,128)

# draw glyph pixels into a size x size image, white on black like the
# glyph list thumbnails. with grid=True the cell borders are drawn on top
#
def render(view,size=48,grid=False):
  image=PIL.Image.new("RGB",(size,size),BACKGROUND)
  draw=PIL.ImageDraw.Draw(image)
  cell=size/SIZE
  for y in range(SIZE):
    for x in range(SIZE):
      if view.pixel(y,x):
        draw.rectangle((int(x*cell),int(y*cell),int((x+1)*cell)-1,int((y+1)*cell)-1),FOREGROUND)
  if grid:
    render_grid(draw,size)
  return image

def render_grid(draw,size,width=2):
  cell=size/SIZE
  for y in range(SIZE):
    for x in range(SIZE):
      draw.rectangle((int(x*cell),int(y*cell),int((x+1)*cell),int((y+1)*cell)),outline=GRIDLINE,width=width)

# whole font as a 16x8 sheet, codepoint order left to right, top down
def render_sheet(table,cell=16,gap=2):
  columns=16
  rows=(len(table)+columns-1)//columns
  image=PIL.Image.new("RGB",(columns*(cell+gap)+gap,rows*(cell+gap)+gap),GRIDLINE)
  for c in range(len(table)):
    x=gap+(c%columns)*(cell+gap)
    y=gap+(c//columns)*(cell+gap)
    image.paste(render(table.get(c),cell),(x,y))
  return image
