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

import sys
import argparse
import logging
from tkinter import *
from tkinter import filedialog
import PIL.ImageTk
import glyphimage
from charclass import info_line
from entrydialog import EntryDialog
from fonterrors import FormatError, GLYPHS, SIZE, check_codepoint
from fontstate import STATEFILE, load_state, save_state
from fonttable import FontTable, EXPORT_FORMATS

log=logging.getLogger("fontmaker")

# editing grid for one glyph. it only draws what it is given and reports
# clicks as (row,col), all changes go through whoever registered on_toggle
#
class GridView(Canvas):

  def __init__(self,master,stride=50):
    self.stride=stride
    Canvas.__init__(self,master,width=SIZE*stride+2,height=SIZE*stride+2, \
      borderwidth=0,highlightthickness=0,relief=FLAT)
    self.callbacks=[]
    self.bind("<Button-1>",self.click)

  def on_toggle(self,callback):
    self.callbacks.append(callback)

  def click(self,event):
    col=int(self.canvasx(event.x)/self.stride)
    row=int(self.canvasy(event.y)/self.stride)
    if row<0 or row>=SIZE or col<0 or col>=SIZE:
      return
    for callback in self.callbacks:
      callback(row,col)

  def render(self,view,cursor=None):
    self.delete(ALL)
    s=self.stride
    for y in range(SIZE):
      for x in range(SIZE):
        if view.pixel(y,x):
          inside="white"
        else:
          inside="black"
        if (y,x)==cursor:
          continue
        self.create_rectangle(x*s,y*s,x*s+s,y*s+s,fill=inside,outline="grey",width=2)
    if cursor:
      y,x=cursor
      inside="white" if view.pixel(y,x) else "black"
      self.create_rectangle(x*s,y*s,x*s+s,y*s+s,fill=inside,outline="red",width=2)


class App(Tk):

  def __init__(self,table,settings,statefile=STATEFILE):
    Tk.__init__(self)
    self.title("Font Maker")
    self.table=table
    self.statefile=statefile
    self.cx=settings["cx"]
    self.cy=settings["cy"]
    self.clip=settings["clip"]
    self.currentchar=settings["char"]
    self.updating=False
    buttonframe=Frame(self,relief=FLAT)
    buttonframe.grid(row=0,column=0,columnspan=3,sticky=W+N)
    button=Button(buttonframe,text="Clear",command=lambda: self.edit(self.table.clear))
    button.grid(row=0,column=0,sticky=W+N)
    button=Button(buttonframe,text="Invert",command=lambda: self.edit(self.table.invert))
    button.grid(row=0,column=1,sticky=W+N)
    button=Button(buttonframe,text="Copy export",command=self.copyexport)
    button.grid(row=0,column=2,sticky=W+N)
    button=Button(buttonframe,text="Save state",command=self.savestate)
    button.grid(row=0,column=3,sticky=W+N)
    button=Button(buttonframe,text="Sheet",command=self.savesheet)
    button.grid(row=0,column=4,sticky=W+N)
    self.style=StringVar()
    self.style.set(settings["style"])
    menu=OptionMenu(buttonframe,self.style,*sorted(EXPORT_FORMATS),command=lambda v: self.redraw())
    menu.grid(row=0,column=5,sticky=W+N)
    #
    listframe=Frame(self,relief=SUNKEN)
    listframe.grid(row=1,column=0,sticky=W+N+S)
    self.glyphlist=Listbox(listframe,width=32,height=30,font=("Courier",10),exportselection=False)
    self.glyphlist.grid(row=0,column=0,sticky=W+N+S)
    scroll=Scrollbar(listframe,command=self.glyphlist.yview)
    scroll.grid(row=0,column=1,sticky=N+S)
    self.glyphlist.configure(yscrollcommand=scroll.set)
    for c in range(GLYPHS):
      self.glyphlist.insert(END,self.table.info_line(c))
    self.glyphlist.bind("<<ListboxSelect>>",self.listselect)
    #
    cellframe=Frame(self,relief=FLAT)
    cellframe.grid(row=1,column=1,sticky=W+N)
    self.grid_view=GridView(cellframe,settings["stride"])
    self.grid_view.grid(row=0,column=0,columnspan=2,sticky=W+N)
    self.grid_view.on_toggle(self.toggle)
    self.preview=Label(cellframe)
    self.preview.grid(row=1,column=0,sticky=W+N)
    self.char_info=StringVar()
    label=Label(cellframe,textvariable=self.char_info,font=("Courier",12))
    label.grid(row=1,column=1,sticky=W)
    self.hexvalue=StringVar()
    self.hexentry=Entry(cellframe,textvariable=self.hexvalue,width=20,font=("Courier",12))
    self.hexentry.grid(row=2,column=0,columnspan=2,sticky=W)
    self.hexvalue.trace_add("write",self.hexchanged)
    self.statustext=StringVar()
    label=Label(cellframe,textvariable=self.statustext)
    label.grid(row=3,column=0,columnspan=2,sticky=W)
    #
    exportframe=Frame(self,relief=SUNKEN)
    exportframe.grid(row=1,column=2,sticky=W+N+S)
    self.export=Text(exportframe,width=44,height=34,font=("Courier",10))
    self.export.grid(row=0,column=0,sticky=W+N+S)
    self.bind("<Key>",self.key)
    self.changeto(self.currentchar)

  def status(self,message):
    self.statustext.set("%s"%message)

  def exportformat(self):
    return EXPORT_FORMATS[self.style.get()]

  def changeto(self,charnum):
    self.currentchar=check_codepoint(charnum)
    self.glyphlist.selection_clear(0,END)
    self.glyphlist.selection_set(charnum)
    self.glyphlist.see(charnum)
    self.after(1,self.redraw)

  def listselect(self,event):
    sel=self.glyphlist.curselection()
    if sel:
      self.changeto(sel[0])

  def toggle(self,row,col):
    self.cy,self.cx=row,col
    self.table.toggle_pixel(self.currentchar,row,col)
    self.after(1,self.redraw)

  def edit(self,operation,*args):
    operation(self.currentchar,*args)
    self.after(1,self.redraw)

  def hexchanged(self,*args):
    if self.updating:
      return
    try:
      self.table.load_hex(self.currentchar,self.hexvalue.get())
    except FormatError as e:
      self.status("Invalid hex: %s"%e)
      return
    self.status("")
    self.after(1,lambda: self.redraw(False))

  def redraw(self,sethex=True):
    view=self.table.get(self.currentchar)
    self.grid_view.render(view,(self.cy,self.cx))
    self.previewimage=PIL.ImageTk.PhotoImage(glyphimage.render(view,48))
    self.preview.configure(image=self.previewimage)
    self.char_info.set(info_line(self.currentchar))
    self.glyphlist.delete(self.currentchar)
    self.glyphlist.insert(self.currentchar,self.table.info_line(self.currentchar))
    self.glyphlist.selection_set(self.currentchar)
    if sethex:
      self.updating=True
      self.hexvalue.set(view.hex())
      self.updating=False
    self.export.delete("1.0",END)
    self.export.insert(END,self.table.export_source(self.exportformat()))

  def copyexport(self):
    self.clipboard_clear()
    self.clipboard_append(self.table.export_source(self.exportformat()))
    self.status("Export copied to clipboard")

  def savesheet(self):
    filename=filedialog.asksaveasfilename(initialdir=".",title="Save sheet as...",\
      defaultextension=".png",filetypes=(("png files","*.png"),("all files","*.*")))
    if filename:
      glyphimage.render_sheet(self.table).save(filename,"PNG")
      self.status(filename)

  def settings(self):
    return {
      "char":self.currentchar,
      "cx":self.cx,
      "cy":self.cy,
      "stride":self.grid_view.stride,
      "style":self.style.get(),
      "clip":self.clip,
    }

  def savestate(self):
    save_state(self.statefile,self.table,self.settings())
    self.status("State saved to %s"%self.statefile)

  def askcodepoint(self):
    def convert(text):
      text=text.strip()
      if len(text)==1 and not text.isdigit():
        return check_codepoint(ord(text))
      return check_codepoint(int(text,0))
    d=EntryDialog(self,title="Go to",parameters=("Codepoint or character",str(self.currentchar),convert))
    return d.result

  def key(self,event):
    if isinstance(event.widget,(Entry,Text)):
      return
    if event.keysym=="q":
      self.savestate()
      self.quit()
    elif event.keysym=="Q":
      self.quit()
    elif event.keysym=="Right":
      self.cx=(self.cx+1)%SIZE
    elif event.keysym=="Left":
      self.cx=(self.cx-1)%SIZE
    elif event.keysym=="Down":
      self.cy=(self.cy+1)%SIZE
    elif event.keysym=="Up":
      self.cy=(self.cy-1)%SIZE
    elif event.keysym in ("Next",">"):
      self.changeto((self.currentchar+1)%GLYPHS)
    elif event.keysym in ("Prior","<"):
      self.changeto((self.currentchar-1)%GLYPHS)
    elif event.keysym=="space":
      self.table.toggle_pixel(self.currentchar,self.cy,self.cx)
    elif event.keysym=="z":
      self.table.clear(self.currentchar)
    elif event.keysym=="i":
      self.table.invert(self.currentchar)
    elif event.keysym=="u":
      self.table.roll(self.currentchar,0,-1)
    elif event.keysym=="d":
      self.table.roll(self.currentchar,0,1)
    elif event.keysym=="l":
      self.table.roll(self.currentchar,-1,0)
    elif event.keysym=="r":
      self.table.roll(self.currentchar,1,0)
    elif event.keysym=="c":
      self.clip=self.table.hex_of(self.currentchar)
      self.status("Copied %d"%self.currentchar)
    elif event.keysym=="p":
      if self.clip is None:
        self.status("Nothing to paste")
      else:
        self.table.load_hex(self.currentchar,self.clip)
        self.status("Pasted into %d"%self.currentchar)
    elif event.keysym=="g":
      c=self.askcodepoint()
      if c is not None:
        self.changeto(c)
    else:
      self.status("Unhandled key %s"%(event.keysym))
    self.after(1,self.redraw)


def main(argv=None):
  parser=argparse.ArgumentParser(description="8x8 bitmap font editor for codepoints 0..127")
  parser.add_argument("--state",default=STATEFILE,help="session state file (default %(default)s)")
  parser.add_argument("--style",choices=sorted(EXPORT_FORMATS),help="export source style")
  parser.add_argument("--export",action="store_true",help="print export source and exit")
  parser.add_argument("-v","--verbose",action="store_true")
  args=parser.parse_args(argv)
  logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
    format="%(levelname)s: %(message)s")
  table=FontTable()
  settings=load_state(args.state,table)
  if args.style:
    settings["style"]=args.style
  if args.export:
    sys.stdout.write(table.export_source(EXPORT_FORMATS[settings["style"]]))
    return 0
  log.debug("%d glyphs defined",len(table.defined()))
  app=App(table,settings,args.state)
  app.mainloop()
  return 0

if __name__=="__main__":
  sys.exit(main())
