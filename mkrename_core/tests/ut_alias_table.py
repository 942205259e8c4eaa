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
# description: unit-tests for the rename macro tables
###############################################################################
import collections
import unittest

from mkrename_core.core.funcproto import FUNC_LIST, FunctionDescriptor as FD
from mkrename_core.core.sleef_formats import SLEEF_Binary64, SLEEF_Binary32
from mkrename_core.code_generation.code_object import CodeObject
from mkrename_core.code_generation.alias_table import (
    AliasTableEmitter, generate_alias_table, get_alias_token)


SIN_U01_TABLE = """\
#ifndef DETERMINISTIC

#define xsin Sleef_sind2_u01
#define ysin Sleef_sind2_u01

#define xsinf Sleef_sinf4_u01
#define ysinf Sleef_sinf4_u01

#else //#ifndef DETERMINISTIC

#define xsin Sleef_sind2_u01

#define xsinf Sleef_sinf4_u01

#endif // #ifndef DETERMINISTIC
"""


def split_branches(table):
    """ split a generated table into its (non-deterministic,
        deterministic) branches """
    non_det, det = table.split("#else //#ifndef DETERMINISTIC")
    return non_det, det


class UT_AliasToken(unittest.TestCase):
    def test_tokens(self):
        self.assertEqual(get_alias_token(FD("sin", 35, 0, 0), SLEEF_Binary64), "sin")
        self.assertEqual(get_alias_token(FD("sin", 10, 1, 0), SLEEF_Binary32), "sinf_u1")
        self.assertEqual(get_alias_token(FD("sqrt", 5, 2, 0), SLEEF_Binary64), "sqrt_u05")
        self.assertEqual(get_alias_token(FD("fabs", -1, 0, 0), SLEEF_Binary32), "fabsf")


class UT_AliasTableEmitter(unittest.TestCase):
    def test_single_function_table(self):
        code_object = generate_alias_table(
            CodeObject(), "", "2", "4", func_list=[FD("sin", 1, 0, 1)])
        self.assertEqual(code_object.get(), SIN_U01_TABLE)

    def test_prefix_and_isa(self):
        func_list = [FD("sin", 10, 1, 0), FD("fabs", -1, 0, 0)]
        table = generate_alias_table(
            CodeObject(), "cinz_", "4", "8", isa_name="avx2", func_list=func_list).get()
        non_det, det = split_branches(table)
        for line in [
                "#define xsin_u1 Sleef_sind4_u10avx2",
                "#define ysin_u1 Sleef_cinz_sind4_u10avx2",
                "#define xsinf_u1 Sleef_sinf8_u10avx2",
                "#define ysinf_u1 Sleef_cinz_sinf8_u10avx2",
                "#define xfabs Sleef_fabsd4_avx2",
                "#define yfabs Sleef_cinz_fabsd4_avx2",
                "#define xfabsf Sleef_fabsf8_avx2",
                "#define yfabsf Sleef_cinz_fabsf8_avx2"]:
            self.assertIn(line + "\n", non_det)
        for line in [
                "#define xsin_u1 Sleef_cinz_sind4_u10avx2",
                "#define xsinf_u1 Sleef_cinz_sinf8_u10avx2",
                "#define xfabs Sleef_cinz_fabsd4_avx2",
                "#define xfabsf Sleef_cinz_fabsf8_avx2"]:
            self.assertIn(line + "\n", det)
        self.assertNotIn("#define y", det)

    def test_no_isa(self):
        table = generate_alias_table(
            CodeObject(), "", "2", "4", func_list=[FD("fabs", -1, 0, 0)]).get()
        self.assertIn("#define xfabs Sleef_fabsd2\n", table)
        self.assertIn("#define xfabsf Sleef_fabsf4\n", table)

    def test_entry_count(self):
        """ each function is aliased once per family and precision """
        table = generate_alias_table(CodeObject(), "cinz_", "2", "4", isa_name="sse2").get()
        non_det, det = split_branches(table)
        non_det_lines = non_det.splitlines()
        det_lines = det.splitlines()
        func_num = len(FUNC_LIST)
        self.assertEqual(len([l for l in non_det_lines if l.startswith("#define x")]), 2 * func_num)
        self.assertEqual(len([l for l in non_det_lines if l.startswith("#define y")]), 2 * func_num)
        self.assertEqual(len([l for l in det_lines if l.startswith("#define x")]), 2 * func_num)
        self.assertEqual(len([l for l in det_lines if l.startswith("#define y")]), 0)

    def test_unique_macro_names(self):
        """ a macro is defined at most once in each branch of the
            default function table """
        table = generate_alias_table(CodeObject(), "cinz_", "2", "4", isa_name="sse2").get()
        for branch in split_branches(table):
            name_count = collections.Counter(
                line.split(" ")[1] for line in branch.splitlines()
                if line.startswith("#define "))
            duplicates = dict((name, count) for name, count in name_count.items() if count > 1)
            self.assertEqual(duplicates, {})

    def test_u35_variants(self):
        table = generate_alias_table(CodeObject(), "cinz_", "2", "4", isa_name="sse2").get()
        non_det, det = split_branches(table)
        for line in [
                "#define xsqrt Sleef_sqrtd2_sse2",
                "#define xsqrt_u35 Sleef_sqrtd2_u35sse2",
                "#define ysqrtf_u35 Sleef_cinz_sqrtf4_u35sse2",
                "#define xhypot_u35 Sleef_hypotd2_u35sse2",
                "#define xsincospif_u35 Sleef_sincospif4_u35sse2",
                "#define xsinh_u35 Sleef_sinhd2_u35sse2",
                "#define xexp2f_u35 Sleef_exp2f4_u35sse2"]:
            self.assertIn(line + "\n", non_det)
        self.assertIn("#define xsqrt_u35 Sleef_cinz_sqrtd2_u35sse2\n", det)

    def test_table_order(self):
        func_list = [FD("tan", 35, 0, 0), FD("exp", 10, 1, 0), FD("acos", 35, 0, 0)]
        emitter = AliasTableEmitter("", "2", "4", func_list=func_list)
        code_object = emitter.generate_deterministic_block(CodeObject(), SLEEF_Binary64)
        self.assertEqual(code_object.get(), (
            "#define xtan Sleef_tand2_u35\n"
            "#define xexp_u1 Sleef_expd2_u10\n"
            "#define xacos Sleef_acosd2_u35\n"))

    def test_colliding_tokens(self):
        """ duplicated tokens are emitted as is """
        func_list = [FD("sin", 35, 0, 0), FD("sin", 35, 0, 0)]
        table = generate_alias_table(CodeObject(), "", "2", "4", func_list=func_list).get()
        self.assertEqual(table.count("#define xsin Sleef_sind2_u35\n"), 4)


if __name__ == '__main__':
    unittest.main()
