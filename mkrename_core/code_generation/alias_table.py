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
# description: generation of the macro tables renaming short function
#              tokens (xsin, ysinf_u1, ...) into SLEEF symbol names
###############################################################################

from ..core.funcproto import FUNC_LIST
from ..core.sleef_formats import SLEEF_Binary64, SLEEF_Binary32, PRECISION_LIST
from ..utility.log_report import Log


## build configuration macro selecting the deterministic tables
DETERMINISTIC_MACRO = "DETERMINISTIC"


def get_alias_token(descriptor, precision):
    """ short token (without x/y family prefix) aliasing descriptor in
        precision, e.g. sinf_u1 """
    token = descriptor.name
    if precision is SLEEF_Binary32:
        token += "f"
    if descriptor.has_ulp():
        token += descriptor.get_ulp_suffix()
    return token


class AliasTableEmitter(object):
    """ Generate the rename tables for every function of func_list.

        Two variants are generated, selected by the DETERMINISTIC macro:
        - general build: x<token> aliases the unprefixed symbol and
          y<token> the symbol with attr_prefix
        - deterministic build: x<token> aliases the prefixed symbol """
    def __init__(self, attr_prefix, dp_width, sp_width, isa_name=None, func_list=FUNC_LIST):
        """ @param isa_name ISA label, None if no ISA was given
                   (no disambiguation underscore in this case) """
        self.attr_prefix = attr_prefix
        self.width_map = {
            SLEEF_Binary64: dp_width,
            SLEEF_Binary32: sp_width,
        }
        self.isa_name = "" if isa_name is None else isa_name
        self.isa_separator = "" if isa_name is None else "_"
        self.func_list = func_list

    def get_symbol_name(self, descriptor, precision, attr_prefix=""):
        symbol_name = "Sleef_%s%s%s%s" % (
            attr_prefix, descriptor.name, precision.get_letter(),
            self.width_map[precision])
        if descriptor.has_ulp():
            symbol_name += descriptor.get_ulp_code()
        else:
            symbol_name += self.isa_separator
        return symbol_name + self.isa_name

    def generate_non_deterministic_block(self, code_object, precision):
        for descriptor in self.func_list:
            token = get_alias_token(descriptor, precision)
            code_object.add_directive(
                "define", "x" + token,
                self.get_symbol_name(descriptor, precision))
            code_object.add_directive(
                "define", "y" + token,
                self.get_symbol_name(descriptor, precision, attr_prefix=self.attr_prefix))
        return code_object

    def generate_deterministic_block(self, code_object, precision):
        for descriptor in self.func_list:
            code_object.add_directive(
                "define", "x" + get_alias_token(descriptor, precision),
                self.get_symbol_name(descriptor, precision, attr_prefix=self.attr_prefix))
        return code_object

    def generate(self, code_object):
        """ append both table variants to code_object """
        Log.report(Log.Verbose, "generating rename tables for {} functions",
                   len(self.func_list))
        code_object.add_directive("ifndef", DETERMINISTIC_MACRO)
        for precision in PRECISION_LIST:
            code_object.add_empty_line()
            self.generate_non_deterministic_block(code_object, precision)

        code_object << "\n#else //#ifndef %s\n" % DETERMINISTIC_MACRO
        for precision in PRECISION_LIST:
            code_object.add_empty_line()
            self.generate_deterministic_block(code_object, precision)

        code_object << "\n#endif // #ifndef %s\n" % DETERMINISTIC_MACRO
        return code_object


def generate_alias_table(code_object, attr_prefix, dp_width, sp_width, isa_name=None, func_list=FUNC_LIST):
    return AliasTableEmitter(
        attr_prefix, dp_width, sp_width, isa_name=isa_name, func_list=func_list
    ).generate(code_object)
