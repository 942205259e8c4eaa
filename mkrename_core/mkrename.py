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
# description: mkrename entry point, generates either the rename macro
#              tables or the function declarations of a SLEEF vector
#              extension
###############################################################################

""" Generate a header for renaming SLEEF functions:
        python -m mkrename_core.mkrename <atr prefix> <DP width> <SP width> [<isa>]

    Generate a part of header for library functions:
        python -m mkrename_core.mkrename <atr prefix> <DP width> <SP width>
            <vdouble type> <vfloat type> <vint type> <vint2 type>
            <Macro to enable> [<isa>]
"""

import os
import sys

from mkrename_core.core.funcproto import FUNC_LIST
from mkrename_core.code_generation.code_object import CodeObject
from mkrename_core.utility.log_report import Log
from mkrename_core.utility.mkrename_template import parse_invocation, UsageError


def generate_header(operation, func_list=FUNC_LIST):
    """ run operation and return the CodeObject containing the generated
        header text """
    code_object = operation.generate(CodeObject(), func_list=func_list)
    Log.report(Log.Info, "{} lines generated", code_object.get_line_count())
    return code_object


def main(argv=None, output_stream=None, enable_aavpcs=None, func_list=FUNC_LIST):
    """ @param argv command line (program name included), sys.argv if None
        @param output_stream stream receiving generated code, sys.stdout
               if None
        @return exit status """
    argv = sys.argv if argv is None else argv
    output_stream = sys.stdout if output_stream is None else output_stream
    prog = os.path.basename(argv[0]) if argv else "mkrename"

    try:
        operation = parse_invocation(argv[1:], prog=prog, enable_aavpcs=enable_aavpcs)
    except UsageError:
        return 1

    generate_header(operation, func_list=func_list).push_into_stream(output_stream)
    return 0


if __name__ == "__main__":
    sys.exit(main())
