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
# description: positional parameter templates of the mkrename command
#              and selection of the generation operation
###############################################################################

""" command-line argument templates """

from .log_report import Log

from ..core.funcproto import FUNC_LIST
from ..code_generation.alias_table import generate_alias_table
from ..code_generation.declaration import DeclarationGenerator


class UsageError(Exception):
    """ Exception indicating that mkrename was invoked with an invalid
        parameter list """
    pass


USAGE_RENAME = "Usage : {prog} <atr prefix> <DP width> <SP width> [<isa>]"
USAGE_DECLARATION = (
    "Usage : {prog} <atr prefix> <DP width> <SP width> <vdouble type> "
    "<vfloat type> <vint type> <vint2 type> <Macro to enable> [<isa>]"
)

## accepted parameter counts for each operation
RENAME_PARAM_COUNTS = (3, 4)
DECLARATION_PARAM_COUNTS = (8, 9)


def attr_prefix_parser(attr_prefix_str):
    """ "-" stands for an empty attribute prefix """
    return "" if attr_prefix_str == "-" else attr_prefix_str


class RenameOperation(object):
    """ generation of the rename macro tables """
    def __init__(self, attr_prefix, dp_width, sp_width, isa_name=None):
        self.attr_prefix = attr_prefix_parser(attr_prefix)
        self.dp_width = dp_width
        self.sp_width = sp_width
        # None when no ISA parameter was given
        self.isa_name = isa_name

    def generate(self, code_object, func_list=FUNC_LIST):
        return generate_alias_table(
            code_object, self.attr_prefix, self.dp_width, self.sp_width,
            isa_name=self.isa_name, func_list=func_list)


class DeclarationOperation(object):
    """ generation of the function declarations for one architecture """
    def __init__(self, attr_prefix, dp_width, sp_width,
                 vdouble_type, vfloat_type, vint_type, vint2_type,
                 architecture, isa_name="", enable_aavpcs=None):
        self.attr_prefix = attr_prefix_parser(attr_prefix)
        self.dp_width = dp_width
        self.sp_width = sp_width
        self.vdouble_type = vdouble_type
        self.vfloat_type = vfloat_type
        self.vint_type = vint_type
        self.vint2_type = vint2_type
        self.architecture = architecture
        self.isa_name = isa_name
        self.enable_aavpcs = enable_aavpcs

    def generate(self, code_object, func_list=FUNC_LIST):
        return DeclarationGenerator(
            self.attr_prefix, self.dp_width, self.sp_width,
            self.vdouble_type, self.vfloat_type, self.vint_type, self.vint2_type,
            self.architecture, isa_name=self.isa_name,
            enable_aavpcs=self.enable_aavpcs, func_list=func_list
        ).generate(code_object)


def report_usage(prog):
    """ write the usage diagnostic (whatever the enabled log levels) and
        raise UsageError """
    log_stream = Log.get_log_stream()
    log_stream.write(USAGE_RENAME.format(prog=prog) + "\n")
    log_stream.write(USAGE_DECLARATION.format(prog=prog) + "\n")
    raise UsageError("invalid parameter list for {}".format(prog))


def parse_invocation(params, prog="mkrename", enable_aavpcs=None):
    """ select the generation operation from the positional parameter
        list params (program name excluded)

        @return RenameOperation or DeclarationOperation object
        @raise UsageError if the parameter count matches no operation """
    param_count = len(params)
    if param_count in RENAME_PARAM_COUNTS:
        Log.report(Log.Verbose, "rename mode selected")
        return RenameOperation(*params)
    elif param_count in DECLARATION_PARAM_COUNTS:
        Log.report(Log.Verbose, "declaration mode selected")
        return DeclarationOperation(*params, enable_aavpcs=enable_aavpcs)
    report_usage(prog)
