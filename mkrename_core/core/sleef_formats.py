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
# description: floating-point precisions and vector type names used
#              in SLEEF function prototypes
###############################################################################


class SleefPrecision(object):
    """ floating-point precision of a SLEEF vector function """
    def __init__(self, name, letter, native_pair_type):
        # scalar C type name
        self.name = name
        # letter encoded in SLEEF function names (sind2, sinf4, ...)
        self.letter = letter
        # platform pair type used instead of the Sleef_<type>_2 structure
        # on scalable-vector architectures
        self.native_pair_type = native_pair_type

    def get_name(self):
        return self.name

    def get_letter(self):
        return self.letter

    def get_native_pair_type(self):
        return self.native_pair_type

    def __repr__(self):
        return "SleefPrecision(%s)" % self.name


SLEEF_Binary64 = SleefPrecision("double", "d", "svfloat64x2_t")
SLEEF_Binary32 = SleefPrecision("float", "f", "svfloat32x2_t")

## precisions in generation order
PRECISION_LIST = [SLEEF_Binary64, SLEEF_Binary32]


def get_pair_type_name(type_name):
    """ Build the name of the structure wrapping a pair of SIMD vectors
        of type <type_name>.

        SIMD types can contain spaces (e.g. VSX "vector float"), they are
        replaced by '_' so that the result is a valid C identifier:
        "vector float" -> "Sleef_vector_float_2" """
    return "Sleef_%s_2" % type_name.replace(" ", "_")


class VectorTypeName(object):
    """ vector type name and the name of its pair structure """
    def __init__(self, type_name):
        self.type_name = type_name
        self.pair_type_name = get_pair_type_name(type_name)

    def get_name(self):
        return self.type_name

    def get_pair_name(self):
        return self.pair_type_name

    def __str__(self):
        return self.type_name
