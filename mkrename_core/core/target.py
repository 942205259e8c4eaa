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
# description: ISA targets with specific naming / declaration rules
###############################################################################


## vector width label used when the width is not a compile-time constant
SCALABLE_WIDTH = "x"

## architecture macros whose pair types are provided by the platform
#  (e.g. svfloat64x2_t) rather than by a Sleef_<type>_2 structure
NATIVE_PAIR_ARCHITECTURES = ("__ARM_FEATURE_SVE",)


class BuildOptions(object):
    """ build-time switches of the generator """
    ## emit the AArch64 vector procedure call standard attribute
    #  (ENABLE_AAVPCS)
    enable_aavpcs = False


class IsaRegister(object):
    """ ISA target register """
    target_map = {}

    @staticmethod
    def get_target_name_list():
        return list(IsaRegister.target_map.keys())

    @staticmethod
    def get_target_by_name(isa_name):
        """ return the target object registered for isa_name, a
            GenericIsaTarget if none was registered (ISA labels are not
            validated) """
        if isa_name in IsaRegister.target_map:
            return IsaRegister.target_map[isa_name]
        return GenericIsaTarget(isa_name)

    @staticmethod
    def register_new_target(isa_name, target_object):
        IsaRegister.target_map[isa_name] = target_object

    @staticmethod
    def ISA_TARGET_REGISTER(target_class):
        """ decorator to automate target class registering """
        IsaRegister.register_new_target(target_class.isa_name, target_class())
        return target_class


class GenericIsaTarget(object):
    """ default ISA target: widths are used as given and no specific
        calling convention is required """
    isa_name = ""
    scalable_vector = False
    vector_call_convention = ""

    def __init__(self, isa_name=None):
        if isa_name is not None:
            self.isa_name = isa_name

    def get_vector_width(self, vector_width):
        if self.scalable_vector:
            return SCALABLE_WIDTH
        return vector_width

    def get_call_convention(self, enable_aavpcs=None):
        """ calling convention attribute text appended to prototypes """
        if enable_aavpcs is None:
            enable_aavpcs = BuildOptions.enable_aavpcs
        return self.vector_call_convention if enable_aavpcs else ""

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.isa_name)


@IsaRegister.ISA_TARGET_REGISTER
class ARM_SVE_Target(GenericIsaTarget):
    """ ARM Scalable Vector Extension: vector length is only known at
        run-time """
    isa_name = "sve"
    scalable_vector = True


@IsaRegister.ISA_TARGET_REGISTER
class ARM_AdvSIMD_Target(GenericIsaTarget):
    """ ARM Advanced SIMD (aarch64) """
    isa_name = "advsimd"
    vector_call_convention = " __attribute__((aarch64_vector_pcs))"


def get_pair_type_definition(architecture, precision):
    """ return the platform pair type for precision if architecture
        provides one, else None """
    if architecture in NATIVE_PAIR_ARCHITECTURES:
        return precision.get_native_pair_type()
    return None
