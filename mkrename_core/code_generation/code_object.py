# -*- coding: utf-8 -*-

###############################################################################
# This file is part of mkrename
###############################################################################
# MIT License
#
# Copyright (c) 2018 Kalray
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
###############################################################################
# created:          Oct 19th, 2026
#
# description: accumulation of generated C header code
###############################################################################

import re


class CodeConfiguration(object):
    """ constants to configure coding style """
    tab = "  "


class CodeObject(CodeConfiguration):
    """ generated C text (preprocessor directives and declarations) """
    def __init__(self):
        self.expanded_code = ""
        self.tablevel = 0

    def reindent(self, line):
        """ re indent code line <line> with proper current indentation level """
        # inserting proper indentation level
        codeline = re.sub("\n", lambda _: ("\n" + self.tablevel * CodeObject.tab), line)
        # removing trailing whitespaces
        codeline = re.sub(" +\n", "\n", codeline)
        return codeline

    def append_code(self, code):
        self.expanded_code += code
        return self

    def __lshift__(self, added_code):
        """ implicit code insertion through << operator """
        indented_code = self.reindent(added_code)
        return self.append_code(indented_code)

    def inc_level(self):
        """ increase indentation level """
        self.tablevel += 1
        self.expanded_code += CodeObject.tab

    def dec_level(self):
        """ decrease indentation level """
        self.tablevel -= 1
        # deleting last inserted tab
        if self.expanded_code[-len(CodeObject.tab):] == CodeObject.tab:
            self.expanded_code = self.expanded_code[:-len(CodeObject.tab)]

    def open_level(self, header, inc=True):
        """ open nested block """
        self << header
        if inc: self.inc_level()

    def close_level(self, footer, cr="\n", inc=True):
        """ close nested block """
        if inc: self.dec_level()
        self << "%s%s" % (footer, cr)

    def add_directive(self, directive, *args):
        """ add a preprocessor directive line, e.g.
            add_directive("define", "xsin", "Sleef_sind2_u35") """
        self << " ".join(("#" + directive,) + args) + "\n"

    def add_empty_line(self):
        self << "\n"

    def get_line_count(self):
        return self.expanded_code.count("\n")

    def get(self):
        return self.expanded_code

    def push_into_stream(self, stream):
        """ write generated code into stream """
        stream.write(self.expanded_code)
