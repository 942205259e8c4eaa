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
# description: description of SLEEF's logical functions: name, accuracy
#              and category (which fixes the prototype shape)
###############################################################################


## suffix appended to the short token of a function in the
#  rename tables, indexed by FunctionDescriptor.ulp_suffix
ULP_SUFFIX_LIST = ("", "_u1", "_u05", "_u35", "_u15", "_u3500")


class FunctionDescriptor(object):
    """ one logical SLEEF function (for a given accuracy) """
    def __init__(self, name, ulp, ulp_suffix, func_type):
        self.name = name
        ## maximal error in tenth of ulp, -1 for functions without
        #  accuracy suffix (exact functions)
        self.ulp = ulp
        ## index in ULP_SUFFIX_LIST
        self.ulp_suffix = ulp_suffix
        ## category index in FUNC_TYPE_SHAPES
        self.func_type = func_type

    def has_ulp(self):
        return self.ulp >= 0

    def get_ulp_code(self):
        """ accuracy code embedded in symbol names, e.g. _u10 """
        return "_u%02d" % self.ulp

    def get_ulp_suffix(self):
        return ULP_SUFFIX_LIST[self.ulp_suffix]

    def get_shape(self):
        return FUNC_TYPE_SHAPES[self.func_type]

    def __repr__(self):
        return "FunctionDescriptor(%r, %d, %d, %d)" % (
            self.name, self.ulp, self.ulp_suffix, self.func_type)


class ArgKind(object):
    """ kind of a return value or of an argument in a prototype """
    def __init__(self, tag):
        self.tag = tag

    def __repr__(self):
        return self.tag

## floating-point vector of the current precision
FP_VECTOR = ArgKind("fp")
## pair of floating-point vectors
FP_PAIR = ArgKind("fp-pair")
## integer vector
INT_VECTOR = ArgKind("int")
## plain C scalars, not dependent on the vector types
C_INT = ArgKind("c-int")
C_OPAQUE_POINTER = ArgKind("c-void-ptr")


class FuncTypeShape(object):
    """ return and argument kinds associated with a function category """
    def __init__(self, return_kind, arg_kinds, double_only=False, vector_cc=True):
        self.return_kind = return_kind
        self.arg_kinds = tuple(arg_kinds)
        # no single-precision version
        self.double_only = double_only
        # vector calling convention can be applied (requires vector
        # argument or result)
        self.vector_cc = vector_cc


FUNC_TYPE_SHAPES = {
    0: FuncTypeShape(FP_VECTOR, [FP_VECTOR]),
    1: FuncTypeShape(FP_VECTOR, [FP_VECTOR, FP_VECTOR]),
    2: FuncTypeShape(FP_PAIR, [FP_VECTOR]),
    # ldexp-like
    3: FuncTypeShape(FP_VECTOR, [FP_VECTOR, INT_VECTOR], double_only=True),
    # ilogb-like
    4: FuncTypeShape(INT_VECTOR, [FP_VECTOR], double_only=True),
    5: FuncTypeShape(FP_VECTOR, [FP_VECTOR, FP_VECTOR, FP_VECTOR]),
    6: FuncTypeShape(FP_PAIR, [FP_VECTOR]),
    # getInt / getPtr
    7: FuncTypeShape(C_INT, [C_INT], vector_cc=False),
    8: FuncTypeShape(C_OPAQUE_POINTER, [C_INT], vector_cc=False),
}


FD = FunctionDescriptor

## list of SLEEF functions (name, ulp, ulp suffix index, category)
FUNC_LIST = (
    FD("sin", 35, 0, 0),
    FD("cos", 35, 0, 0),
    FD("sincos", 35, 0, 2),
    FD("tan", 35, 0, 0),
    FD("asin", 35, 0, 0),
    FD("acos", 35, 0, 0),
    FD("atan", 35, 0, 0),
    FD("atan2", 35, 0, 1),
    FD("log", 35, 0, 0),
    FD("cbrt", 35, 0, 0),
    FD("sin", 10, 1, 0),
    FD("cos", 10, 1, 0),
    FD("sincos", 10, 1, 2),
    FD("tan", 10, 1, 0),
    FD("asin", 10, 1, 0),
    FD("acos", 10, 1, 0),
    FD("atan", 10, 1, 0),
    FD("atan2", 10, 1, 1),
    FD("log", 10, 1, 0),
    FD("cbrt", 10, 1, 0),
    FD("exp", 10, 1, 0),
    FD("pow", 10, 1, 1),
    FD("sinh", 10, 1, 0),
    FD("cosh", 10, 1, 0),
    FD("tanh", 10, 1, 0),
    FD("sinh", 35, 3, 0),
    FD("cosh", 35, 3, 0),
    FD("tanh", 35, 3, 0),

    FD("fastsin", 3500, 5, 0),
    FD("fastcos", 3500, 5, 0),
    FD("fastpow", 3500, 5, 1),

    FD("asinh", 10, 1, 0),
    FD("acosh", 10, 1, 0),
    FD("atanh", 10, 1, 0),
    FD("exp2", 10, 1, 0),
    FD("exp2", 35, 3, 0),
    FD("exp10", 10, 1, 0),
    FD("exp10", 35, 3, 0),
    FD("expm1", 10, 1, 0),
    FD("log10", 10, 1, 0),
    FD("log2", 10, 1, 0),
    FD("log2", 35, 3, 0),
    FD("log1p", 10, 1, 0),
    FD("sincospi", 5, 2, 2),
    FD("sincospi", 35, 3, 2),
    FD("sinpi", 5, 2, 0),
    FD("cospi", 5, 2, 0),
    FD("ldexp", -1, 0, 3),
    FD("ilogb", -1, 0, 4),

    FD("fma", -1, 0, 5),
    FD("sqrt", -1, 0, 0),
    FD("sqrt", 5, 2, 0),
    FD("sqrt", 35, 3, 0),
    FD("hypot", 5, 2, 1),
    FD("hypot", 35, 3, 1),
    FD("fabs", -1, 0, 0),
    FD("copysign", -1, 0, 1),
    FD("fmax", -1, 0, 1),
    FD("fmin", -1, 0, 1),
    FD("fdim", -1, 0, 1),
    FD("fmod", -1, 0, 1),
    FD("remainder", -1, 0, 1),
    FD("modf", -1, 0, 6),
    FD("lgamma", 10, 1, 0),
    FD("tgamma", 10, 1, 0),
    FD("erf", 10, 1, 0),
    FD("erfc", 15, 4, 0),

    FD("trunc", -1, 0, 0),
    FD("floor", -1, 0, 0),
    FD("ceil", -1, 0, 0),
    FD("round", -1, 0, 0),
    FD("rint", -1, 0, 0),
    FD("nextafter", -1, 0, 1),
    FD("frfrexp", -1, 0, 0),
    FD("expfrexp", -1, 0, 4),

    FD("getInt", -1, 0, 7),
    FD("getPtr", -1, 0, 8),
)
