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
# description: C prototype generation for SLEEF vector functions
###############################################################################

from ..core.funcproto import (
    FP_VECTOR, FP_PAIR, INT_VECTOR, C_INT, C_OPAQUE_POINTER,
)
from ..core.sleef_formats import SLEEF_Binary32
from ..utility.log_report import Log


## qualifiers prepended to every declaration, IMPORT and CONST are
#  macros defined by the translation unit including the declarations
DECLARATION_QUALIFIERS = "IMPORT CONST"


def get_function_symbol_name(descriptor, precision, vector_width, isa_name="", attr_prefix=""):
    """ build the fully qualified name of a SLEEF function, e.g.
        Sleef_sind4_u10avx2 or Sleef_fabsd2_sse2

        @param descriptor FunctionDescriptor of the function
        @param precision SleefPrecision object
        @param vector_width vector width label (str)
        @param isa_name ISA label, may be empty
        @param attr_prefix optional prefix tag inserted before the
               function name (e.g. "cinz_") """
    symbol_name = "Sleef_%s%s%s%s" % (
        attr_prefix, descriptor.name, precision.get_letter(), vector_width)
    if descriptor.has_ulp():
        symbol_name += descriptor.get_ulp_code()
    elif isa_name != "":
        symbol_name += "_"
    return symbol_name + isa_name


class PrototypeFormatter(object):
    """ generate the declarations of SLEEF functions for one precision,
        one vector width and one ISA """
    def __init__(self, precision, vector_width, fp_type, fp_pair_type, int_type,
                 isa_name="", call_conv=""):
        """ @param fp_type floating-point vector type name
            @param fp_pair_type name of the pair of fp_type vectors
            @param int_type integer vector type name
            @param call_conv attribute specifying the calling convention
                   (appended after the argument list) """
        self.precision = precision
        self.vector_width = vector_width
        self.isa_name = isa_name
        self.call_conv = call_conv
        self.type_map = {
            FP_VECTOR: fp_type,
            FP_PAIR: fp_pair_type,
            INT_VECTOR: int_type,
            C_INT: "int",
            C_OPAQUE_POINTER: "void*",
        }

    def get_type_name(self, arg_kind):
        return self.type_map[arg_kind]

    def is_declared(self, descriptor):
        # no single precision version for double-only categories
        return not (self.precision is SLEEF_Binary32 and descriptor.get_shape().double_only)

    def get_declaration(self, descriptor, attr_prefix=""):
        """ return the C declaration of descriptor (str), or None if the
            function does not exist in self's precision """
        if not self.is_declared(descriptor):
            Log.report(Log.Verbose, "skipping {} declaration for {}",
                       self.precision.get_name(), descriptor.name)
            return None
        shape = descriptor.get_shape()
        symbol_name = get_function_symbol_name(
            descriptor, self.precision, self.vector_width,
            isa_name=self.isa_name, attr_prefix=attr_prefix)
        arg_format_list = ", ".join(self.get_type_name(arg_kind) for arg_kind in shape.arg_kinds)
        call_conv = self.call_conv if shape.vector_cc else ""
        return "%s %s %s(%s)%s;" % (
            DECLARATION_QUALIFIERS, self.get_type_name(shape.return_kind),
            symbol_name, arg_format_list, call_conv)

    def output_function_declaration(self, code_object, descriptor, attr_prefix=""):
        """ append descriptor's declaration (if any) to code_object """
        declaration = self.get_declaration(descriptor, attr_prefix=attr_prefix)
        if declaration is not None:
            code_object << declaration + "\n"
        return code_object
