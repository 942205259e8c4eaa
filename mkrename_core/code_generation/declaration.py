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
# description: generation of the SLEEF function declarations (pair type
#              definitions and prototypes) for one architecture
###############################################################################

from ..core.funcproto import FUNC_LIST
from ..core.sleef_formats import SLEEF_Binary64, SLEEF_Binary32, VectorTypeName
from ..core.target import IsaRegister, get_pair_type_definition
from ..utility.log_report import Log

from .prototype import PrototypeFormatter


## vector type name disabling declaration generation
UNDEFINED_TYPE_NAME = "-"


class DeclarationGenerator(object):
    """ Generate, guarded by the architecture macro, the pair type
        definitions and the prototypes of every function of func_list
        in double and single precision """
    def __init__(self, attr_prefix, dp_width, sp_width,
                 vdouble_type, vfloat_type, vint_type, vint2_type,
                 architecture, isa_name="", enable_aavpcs=None, func_list=FUNC_LIST):
        self.attr_prefix = attr_prefix
        self.architecture = architecture
        self.isa_name = isa_name
        self.target = IsaRegister.get_target_by_name(isa_name)
        # scalable vector ISA force the width label
        self.dp_width = self.target.get_vector_width(dp_width)
        self.sp_width = self.target.get_vector_width(sp_width)
        self.call_conv = self.target.get_call_convention(enable_aavpcs)
        self.vdouble_type = VectorTypeName(vdouble_type)
        self.vfloat_type = VectorTypeName(vfloat_type)
        self.vint_type = vint_type
        self.vint2_type = vint2_type
        self.func_list = func_list

    def generate_pair_typedef(self, code_object, vector_type, precision):
        """ define the structure wrapping a pair of vector_type, guarded
            by <pair name>_DEFINED so that several generated headers can
            be included in the same translation unit """
        pair_name = vector_type.get_pair_name()
        code_object.add_directive("ifndef", pair_name + "_DEFINED")
        native_pair_type = get_pair_type_definition(self.architecture, precision)
        if native_pair_type is not None:
            code_object << "typedef %s %s;\n" % (native_pair_type, pair_name)
        else:
            code_object.open_level(header="typedef struct {\n")
            code_object << "%s x, y;\n" % vector_type.get_name()
            code_object.close_level(footer="} %s;" % pair_name)
        code_object.add_directive("define", pair_name + "_DEFINED")
        code_object.add_directive("endif")
        return code_object

    def generate_precision_block(self, code_object, precision, vector_type, vector_width):
        Log.report(Log.Verbose, "generating {} declarations (width={})",
                   precision.get_name(), vector_width)
        code_object.add_empty_line()
        self.generate_pair_typedef(code_object, vector_type, precision)
        code_object.add_empty_line()

        formatter = PrototypeFormatter(
            precision, vector_width, vector_type.get_name(),
            vector_type.get_pair_name(), self.vint_type,
            isa_name=self.isa_name, call_conv=self.call_conv)
        for descriptor in self.func_list:
            formatter.output_function_declaration(code_object, descriptor)
            formatter.output_function_declaration(code_object, descriptor, attr_prefix=self.attr_prefix)
        return code_object

    def generate(self, code_object):
        code_object.add_directive("ifdef", self.architecture)
        if self.vdouble_type.get_name() != UNDEFINED_TYPE_NAME:
            self.generate_precision_block(code_object, SLEEF_Binary64, self.vdouble_type, self.dp_width)
            self.generate_precision_block(code_object, SLEEF_Binary32, self.vfloat_type, self.sp_width)
        else:
            Log.report(Log.Warning, "no vector type for {}, no declaration generated", self.architecture)
        code_object.add_directive("endif")
        return code_object
